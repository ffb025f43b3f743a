import argparse
import asyncio
import logging
from typing import List, Optional

from issflyover.domains.common.exceptions import FlyoverError
from issflyover.domains.common.value_objects.coordinate import Coordinates
from issflyover.domains.satellite.models.pass_model import PassWindow
from issflyover.domains.satellite.services.flyover_service import FlyoverService

logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print the next ISS passes over your current location."
    )
    parser.add_argument("--lat", type=float, help="Observer latitude, skips the IP lookup.")
    parser.add_argument("--lon", type=float, help="Observer longitude, skips the IP lookup.")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level, overrides LOG_LEVEL from the environment.",
    )
    args = parser.parse_args(argv)
    if (args.lat is None) != (args.lon is None):
        parser.error("--lat and --lon must be given together")
    return args


def format_pass(window: PassWindow) -> str:
    # e.g. Next pass at Tue Jun 01 2021 13:01:35 GMT-0700 (PDT) for 465 seconds!
    rise = window.rise_datetime().strftime("%a %b %d %Y %H:%M:%S GMT%z (%Z)")
    return f"Next pass at {rise} for {window.duration} seconds!"


async def run(
    flyover_service: FlyoverService, coords: Optional[Coordinates] = None
) -> List[str]:
    """Run one lookup and return the lines to print"""
    try:
        if coords is not None:
            passes = await flyover_service.next_iss_times_for_coordinates(coords)
        else:
            passes = await flyover_service.next_iss_times_for_my_location()
    except FlyoverError as e:
        return [f"It didn't work: {e.message}"]
    return [format_pass(window) for window in passes]


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_arguments(argv)
    if args.log_level is not None:
        logging.getLogger().setLevel(args.log_level)

    coords = None
    if args.lat is not None:
        coords = Coordinates(latitude=args.lat, longitude=args.lon)

    for line in asyncio.run(run(FlyoverService(), coords)):
        print(line)


if __name__ == "__main__":
    main()
