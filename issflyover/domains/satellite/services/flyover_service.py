import logging
from typing import Awaitable, List, Optional, TypeVar

from issflyover.core.config import EndpointSettings, get_endpoint_settings
from issflyover.domains.common.adapters.http_json_client import HttpJsonClient
from issflyover.domains.common.exceptions import FlyoverError, FlyoverStage
from issflyover.domains.common.value_objects.coordinate import Coordinates
from issflyover.domains.location.interfaces.address_service_interface import (
    AddressServiceInterface,
)
from issflyover.domains.location.interfaces.geolocation_service_interface import (
    GeolocationServiceInterface,
)
from issflyover.domains.location.services.geolocation_service import (
    GeolocationService,
)
from issflyover.domains.location.services.ip_address_service import IpAddressService
from issflyover.domains.satellite.interfaces.pass_time_service_interface import (
    PassTimeServiceInterface,
)
from issflyover.domains.satellite.models.pass_model import PassWindow
from issflyover.domains.satellite.services.pass_time_service import PassTimeService

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FlyoverService:
    """Chains the three lookups that give the next ISS passes for the caller

    IP address -> coordinates -> pass windows. Each stage waits for the
    previous one and the first failure ends the chain: its exception is
    raised to the caller unchanged, with `stage` set to the failing stage.
    """

    def __init__(
        self,
        address_service: Optional[AddressServiceInterface] = None,
        geolocation_service: Optional[GeolocationServiceInterface] = None,
        pass_time_service: Optional[PassTimeServiceInterface] = None,
        settings: Optional[EndpointSettings] = None,
        http_client: Optional[HttpJsonClient] = None,
    ):
        settings = settings or get_endpoint_settings()
        self._address_service = address_service or IpAddressService(
            settings, http_client
        )
        self._geolocation_service = geolocation_service or GeolocationService(
            settings, http_client
        )
        self._pass_time_service = pass_time_service or PassTimeService(
            settings, http_client
        )

    async def _run_stage(self, stage: FlyoverStage, step: Awaitable[T]) -> T:
        try:
            return await step
        except FlyoverError as e:
            if e.stage is None:
                e.stage = stage
            logger.error(f"ISS fly-over lookup failed at stage '{e.stage.value}': {e}")
            raise

    async def _validated(self, coords: Coordinates) -> Coordinates:
        return coords.ensure_in_range()

    async def next_iss_times_for_my_location(self) -> List[PassWindow]:
        """Return the upcoming ISS passes for the caller's current location

        Returns:
            pass windows in the order the pass-time service returned them

        Raises:
            TransportError, RemoteServiceError, DecodeError: from the failing stage
            InvalidCoordinatesError: the geolocation result is out of range
        """
        ip = await self._run_stage(
            FlyoverStage.ADDRESS, self._address_service.fetch_my_ip()
        )
        logger.info(f"Resolved public IP: {ip}")

        coords = await self._run_stage(
            FlyoverStage.COORDINATES,
            self._geolocation_service.fetch_coords_by_ip(ip),
        )
        logger.info(f"Resolved coordinates: {coords.latitude}, {coords.longitude}")

        return await self.next_iss_times_for_coordinates(coords)

    async def next_iss_times_for_coordinates(
        self, coords: Coordinates
    ) -> List[PassWindow]:
        """Validate `coords` and return the upcoming ISS passes over them"""
        coords = await self._run_stage(
            FlyoverStage.COORDINATES, self._validated(coords)
        )
        passes = await self._run_stage(
            FlyoverStage.PASS_TIMES,
            self._pass_time_service.fetch_iss_flyover_times(coords),
        )
        logger.info(f"Found {len(passes)} upcoming ISS passes")
        return passes
