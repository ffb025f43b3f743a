import logging
from typing import Optional

from pydantic import ValidationError
from yarl import URL

from issflyover.core.config import EndpointSettings, get_endpoint_settings
from issflyover.domains.common.adapters.http_json_client import HttpJsonClient
from issflyover.domains.common.exceptions import DecodeError, FlyoverStage
from issflyover.domains.common.value_objects.coordinate import Coordinates
from issflyover.domains.location.interfaces.geolocation_service_interface import (
    GeolocationServiceInterface,
)
from issflyover.domains.location.models.location_model import GeoLookupResponse

logger = logging.getLogger(__name__)


class GeolocationService(GeolocationServiceInterface):
    """IP geolocation lookup, the address is appended to the endpoint path

    The returned coordinates are not range-checked here.
    """

    def __init__(
        self,
        settings: Optional[EndpointSettings] = None,
        http_client: Optional[HttpJsonClient] = None,
    ):
        self._settings = settings or get_endpoint_settings()
        self._http = http_client or HttpJsonClient(
            timeout_seconds=self._settings.timeout_seconds
        )

    def _url_for(self, ip: str) -> URL:
        # the address is one path segment, reserved characters are escaped
        return URL(self._settings.geo_lookup_url.rstrip("/")) / ip

    async def fetch_coords_by_ip(self, ip: str) -> Coordinates:
        payload = await self._http.get_json(
            self._url_for(ip),
            stage=FlyoverStage.COORDINATES,
            what="coordinates for IP",
        )
        try:
            data = GeoLookupResponse.model_validate(payload).data
        except ValidationError as e:
            raise DecodeError(
                f"Unexpected geolocation response for {ip}: {payload!r}",
                body=str(payload),
                stage=FlyoverStage.COORDINATES,
            ) from e

        coords = Coordinates(latitude=data.latitude, longitude=data.longitude)
        logger.debug(f"IP {ip} located at {coords.latitude}, {coords.longitude}")
        return coords
