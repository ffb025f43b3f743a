import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from issflyover.domains.common.exceptions import (
    FlyoverError,
    InvalidCoordinatesError,
)
from issflyover.domains.common.value_objects.coordinate import Coordinates
from issflyover.domains.satellite.models.pass_model import PassWindow
from issflyover.domains.satellite.services.flyover_service import FlyoverService

logger = logging.getLogger(__name__)
router = APIRouter()


def get_flyover_service() -> FlyoverService:
    return FlyoverService()


@router.get("/iss/passes", response_model=List[PassWindow])
async def read_iss_passes(
    lat: Optional[float] = Query(None, description="Observer latitude"),
    lon: Optional[float] = Query(None, description="Observer longitude"),
    flyover_service: FlyoverService = Depends(get_flyover_service),
) -> List[PassWindow]:
    """Upcoming ISS passes, for the given lat/lon or the caller's IP location"""
    if (lat is None) != (lon is None):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="lat and lon must be given together",
        )

    try:
        if lat is not None:
            coords = Coordinates(latitude=lat, longitude=lon)
            return await flyover_service.next_iss_times_for_coordinates(coords)
        return await flyover_service.next_iss_times_for_my_location()
    except InvalidCoordinatesError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"stage": e.stage.value, "message": e.message},
        )
    except FlyoverError as e:
        logger.error(f"ISS pass lookup failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"stage": e.stage.value if e.stage else None, "message": e.message},
        )
