from abc import ABC, abstractmethod

from issflyover.domains.common.value_objects.coordinate import Coordinates


class GeolocationServiceInterface(ABC):
    """Resolves approximate coordinates from a network address"""

    @abstractmethod
    async def fetch_coords_by_ip(self, ip: str) -> Coordinates:
        """Return the coordinates reported for `ip`"""
        pass
