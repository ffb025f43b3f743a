import asyncio
import json
import logging
from typing import Any, Dict, Optional, Union

import aiohttp
from yarl import URL

from issflyover.domains.common.exceptions import (
    DecodeError,
    FlyoverStage,
    RemoteServiceError,
    TransportError,
)

logger = logging.getLogger(__name__)


class HttpJsonClient:
    """Single-shot JSON GET over aiohttp, mapping failures to the stage errors

    When no session is given, a fresh ClientSession is opened and closed
    around each request.
    """

    def __init__(
        self,
        session: Optional[aiohttp.ClientSession] = None,
        timeout_seconds: Optional[float] = None,
    ):
        self._session = session
        self._timeout = (
            aiohttp.ClientTimeout(total=timeout_seconds)
            if timeout_seconds is not None
            else None
        )

    async def get_json(
        self,
        url: Union[str, URL],
        params: Optional[Dict[str, Any]] = None,
        *,
        stage: FlyoverStage,
        what: str,
    ) -> Any:
        """GET `url` and return the decoded JSON body

        Args:
            url: target URL
            params: query parameters
            stage: stage tag put on any raised error
            what: short description of the fetched resource, used in messages

        Raises:
            TransportError: connection, DNS or timeout failure
            RemoteServiceError: non-2xx status
            DecodeError: body is not valid JSON
        """
        logger.debug(f"GET {url} params={params} ({stage.value})")
        try:
            if self._session is not None:
                return await self._fetch(self._session, url, params, stage, what)

            session_kwargs = {}
            if self._timeout is not None:
                session_kwargs["timeout"] = self._timeout
            async with aiohttp.ClientSession(**session_kwargs) as session:
                return await self._fetch(session, url, params, stage, what)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(
                f"Request failed when fetching {what}: {e!r}", cause=e, stage=stage
            ) from e

    async def _fetch(
        self,
        session: aiohttp.ClientSession,
        url: Union[str, URL],
        params: Optional[Dict[str, Any]],
        stage: FlyoverStage,
        what: str,
    ) -> Any:
        request_kwargs = {}
        if params is not None:
            request_kwargs["params"] = params
        if self._timeout is not None:
            request_kwargs["timeout"] = self._timeout

        async with session.get(url, **request_kwargs) as response:
            raw = await response.read()
            body = raw.decode("utf-8", errors="replace")

            if not 200 <= response.status < 300:
                raise RemoteServiceError(
                    f"Status Code {response.status} when fetching {what}. Response: {body}",
                    status=response.status,
                    body=body,
                    stage=stage,
                )

        try:
            return json.loads(raw)
        except ValueError as e:
            raise DecodeError(
                f"Invalid JSON when fetching {what}: {e}", body=body, stage=stage
            ) from e
