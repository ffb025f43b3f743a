"""
Location domain module

Resolves the caller's public IP address and the approximate coordinates
behind it.
"""

from issflyover.domains.location.interfaces.address_service_interface import (
    AddressServiceInterface,
)
from issflyover.domains.location.interfaces.geolocation_service_interface import (
    GeolocationServiceInterface,
)
from issflyover.domains.location.services.ip_address_service import IpAddressService
from issflyover.domains.location.services.geolocation_service import (
    GeolocationService,
)
