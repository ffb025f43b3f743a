from abc import ABC, abstractmethod
from typing import List

from issflyover.domains.common.value_objects.coordinate import Coordinates
from issflyover.domains.satellite.models.pass_model import PassWindow


class PassTimeServiceInterface(ABC):
    """Resolves upcoming ISS pass windows for a location"""

    @abstractmethod
    async def fetch_iss_flyover_times(self, coords: Coordinates) -> List[PassWindow]:
        """Return the pass windows for `coords`, in the order the service gives them"""
        pass
