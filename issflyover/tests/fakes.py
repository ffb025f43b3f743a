"""
Test doubles for the fly-over pipeline

In-memory resolvers that count their calls, and an aiohttp app serving the
three lookup endpoints with fixture bodies.
"""

from collections import Counter
from contextlib import asynccontextmanager
from typing import Dict, List, Optional, Tuple

from aiohttp import web
from aiohttp.test_utils import TestServer

from issflyover.core.config import EndpointSettings
from issflyover.domains.common.value_objects.coordinate import Coordinates
from issflyover.domains.location.interfaces.address_service_interface import (
    AddressServiceInterface,
)
from issflyover.domains.location.interfaces.geolocation_service_interface import (
    GeolocationServiceInterface,
)
from issflyover.domains.satellite.interfaces.pass_time_service_interface import (
    PassTimeServiceInterface,
)
from issflyover.domains.satellite.models.pass_model import PassWindow

FIXTURE_IP = "162.245.144.188"
FIXTURE_LAT = 37.3394
FIXTURE_LON = -121.895
FIXTURE_PASSES = [{"risetime": 1622574095, "duration": 465}]

# Port 1 is not served on the test hosts, connections are refused
UNREACHABLE_URL = "http://127.0.0.1:1"


class FakeAddressService(AddressServiceInterface):
    def __init__(self, call_log: List[str], ip: str = FIXTURE_IP, error=None):
        self.call_log = call_log
        self.ip = ip
        self.error = error
        self.calls = 0

    async def fetch_my_ip(self) -> str:
        self.calls += 1
        self.call_log.append("address")
        if self.error is not None:
            raise self.error
        return self.ip


class FakeGeolocationService(GeolocationServiceInterface):
    def __init__(
        self,
        call_log: List[str],
        latitude: float = FIXTURE_LAT,
        longitude: float = FIXTURE_LON,
        error=None,
    ):
        self.call_log = call_log
        self.latitude = latitude
        self.longitude = longitude
        self.error = error
        self.calls = 0
        self.received_ips: List[str] = []

    async def fetch_coords_by_ip(self, ip: str) -> Coordinates:
        self.calls += 1
        self.call_log.append("coordinates")
        self.received_ips.append(ip)
        if self.error is not None:
            raise self.error
        return Coordinates(latitude=self.latitude, longitude=self.longitude)


class FakePassTimeService(PassTimeServiceInterface):
    def __init__(self, call_log: List[str], passes=None, error=None):
        self.call_log = call_log
        self.passes = FIXTURE_PASSES if passes is None else passes
        self.error = error
        self.calls = 0
        self.received_coords: List[Coordinates] = []

    async def fetch_iss_flyover_times(self, coords: Coordinates) -> List[PassWindow]:
        self.calls += 1
        self.call_log.append("pass_times")
        self.received_coords.append(coords)
        if self.error is not None:
            raise self.error
        return [PassWindow(**p) for p in self.passes]


def build_lookup_app(
    hits: Counter,
    failures: Optional[Dict[str, str]] = None,
    geo_body: Optional[dict] = None,
    ip_body: Optional[dict] = None,
    pass_body: Optional[dict] = None,
    geo_requests: Optional[List[Tuple[str, dict]]] = None,
) -> web.Application:
    """aiohttp app serving /ip, /geo/{ip} and /iss-pass.json

    `failures` maps a route key ("ip", "geo", "pass") to "status" for a 500
    answer, "malformed" for a non-JSON 200 body or "bad_utf8" for a JSON
    body holding bytes that are not UTF-8. `*_body` replace the fixture
    payloads. Each geolocation request is recorded in `geo_requests` as
    (ip path segment, query).
    """
    failures = failures or {}

    def fail_or(key: str, payload: dict) -> web.Response:
        hits[key] += 1
        mode = failures.get(key)
        if mode == "status":
            return web.Response(status=500, text="upstream exploded")
        if mode == "malformed":
            return web.Response(status=200, text="<html>not json</html>")
        if mode == "bad_utf8":
            return web.Response(
                status=200,
                body=b'{"ip": "\xff\xfe"}',
                content_type="application/json",
            )
        return web.json_response(payload)

    async def ip_handler(request: web.Request) -> web.Response:
        assert request.query.get("format") == "json"
        return fail_or("ip", ip_body if ip_body is not None else {"ip": FIXTURE_IP})

    async def geo_handler(request: web.Request) -> web.Response:
        if geo_requests is not None:
            geo_requests.append((request.match_info["ip"], dict(request.query)))
        body = geo_body or {
            "status": "success",
            "data": {
                "ipv4": FIXTURE_IP,
                "latitude": FIXTURE_LAT,
                "longitude": FIXTURE_LON,
            },
        }
        return fail_or("geo", body)

    async def pass_handler(request: web.Request) -> web.Response:
        assert float(request.query["lat"]) == FIXTURE_LAT
        assert float(request.query["lon"]) == FIXTURE_LON
        body = pass_body
        if body is None:
            body = {"message": "success", "response": FIXTURE_PASSES}
        return fail_or("pass", body)

    app = web.Application()
    app.router.add_get("/ip", ip_handler)
    app.router.add_get("/geo/{ip}", geo_handler)
    app.router.add_get("/iss-pass.json", pass_handler)
    return app


@asynccontextmanager
async def serve_lookups(
    hits: Counter, failures: Optional[Dict[str, str]] = None, **overrides
):
    """Start the lookup app and yield EndpointSettings pointing at it

    Extra keyword arguments go to `build_lookup_app`.
    """
    server = TestServer(build_lookup_app(hits, failures, **overrides))
    async with server:
        yield EndpointSettings(
            ip_lookup_url=str(server.make_url("/ip")),
            geo_lookup_url=str(server.make_url("/geo")),
            pass_lookup_url=str(server.make_url("/iss-pass.json")),
            timeout_seconds=5.0,
        )
