import logging
from typing import List, Optional

from pydantic import ValidationError

from issflyover.core.config import EndpointSettings, get_endpoint_settings
from issflyover.domains.common.adapters.http_json_client import HttpJsonClient
from issflyover.domains.common.exceptions import DecodeError, FlyoverStage
from issflyover.domains.common.value_objects.coordinate import Coordinates
from issflyover.domains.satellite.interfaces.pass_time_service_interface import (
    PassTimeServiceInterface,
)
from issflyover.domains.satellite.models.pass_model import (
    PassLookupResponse,
    PassWindow,
)

logger = logging.getLogger(__name__)


class PassTimeService(PassTimeServiceInterface):
    """ISS pass-time lookup

    Sends latitude/longitude as `lat`/`lon` query parameters. The pass count
    and horizon are left to the remote service's defaults, and the returned
    order is kept as-is.
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

    async def fetch_iss_flyover_times(self, coords: Coordinates) -> List[PassWindow]:
        payload = await self._http.get_json(
            self._settings.pass_lookup_url,
            params={"lat": coords.latitude, "lon": coords.longitude},
            stage=FlyoverStage.PASS_TIMES,
            what="ISS pass times",
        )
        try:
            passes = PassLookupResponse.model_validate(payload).response
        except ValidationError as e:
            raise DecodeError(
                f"Unexpected ISS pass-time response: {payload!r}",
                body=str(payload),
                stage=FlyoverStage.PASS_TIMES,
            ) from e

        logger.debug(
            f"Got {len(passes)} ISS passes for {coords.latitude}, {coords.longitude}"
        )
        return passes
