import logging
from typing import Optional

from pydantic import ValidationError

from issflyover.core.config import EndpointSettings, get_endpoint_settings
from issflyover.domains.common.adapters.http_json_client import HttpJsonClient
from issflyover.domains.common.exceptions import DecodeError, FlyoverStage
from issflyover.domains.location.interfaces.address_service_interface import (
    AddressServiceInterface,
)
from issflyover.domains.location.models.location_model import IpLookupResponse

logger = logging.getLogger(__name__)


class IpAddressService(AddressServiceInterface):
    """Looks up the caller's public IP with one request to the IP lookup endpoint"""

    def __init__(
        self,
        settings: Optional[EndpointSettings] = None,
        http_client: Optional[HttpJsonClient] = None,
    ):
        self._settings = settings or get_endpoint_settings()
        self._http = http_client or HttpJsonClient(
            timeout_seconds=self._settings.timeout_seconds
        )

    async def fetch_my_ip(self) -> str:
        payload = await self._http.get_json(
            self._settings.ip_lookup_url,
            params={"format": "json"},
            stage=FlyoverStage.ADDRESS,
            what="IP",
        )
        try:
            ip = IpLookupResponse.model_validate(payload).ip
        except ValidationError as e:
            raise DecodeError(
                f"Unexpected IP lookup response: {payload!r}",
                body=str(payload),
                stage=FlyoverStage.ADDRESS,
            ) from e

        logger.debug(f"Public IP resolved to {ip}")
        return ip
