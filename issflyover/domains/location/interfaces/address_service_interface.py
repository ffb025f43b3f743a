from abc import ABC, abstractmethod


class AddressServiceInterface(ABC):
    """Resolves the caller's public network address"""

    @abstractmethod
    async def fetch_my_ip(self) -> str:
        """Return the caller's public IP address as a string"""
        pass
