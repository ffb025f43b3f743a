import math

from pydantic import Field

from issflyover.domains.common.exceptions import (
    FlyoverStage,
    InvalidCoordinatesError,
)
from issflyover.domains.common.models.base_model import ValueObject

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


class Coordinates(ValueObject):
    """Geographic position of the observer, in degrees

    Values are stored as received. Use `is_in_range` or `ensure_in_range` before
    handing them to anything that trusts the range.
    """

    latitude: float = Field(..., description="Latitude, -90 to 90")
    longitude: float = Field(..., description="Longitude, -180 to 180")

    def is_in_range(self) -> bool:
        if not (math.isfinite(self.latitude) and math.isfinite(self.longitude)):
            return False
        return (
            LATITUDE_RANGE[0] <= self.latitude <= LATITUDE_RANGE[1]
            and LONGITUDE_RANGE[0] <= self.longitude <= LONGITUDE_RANGE[1]
        )

    def ensure_in_range(self) -> "Coordinates":
        """Return self, or raise InvalidCoordinatesError when out of range"""
        if not self.is_in_range():
            raise InvalidCoordinatesError(
                self.latitude, self.longitude, stage=FlyoverStage.COORDINATES
            )
        return self
