import os
import logging
from typing import Optional

from pydantic import BaseModel, Field


# --- Logging Setup ---
def resolve_log_level(value: Optional[str], default: str = "INFO") -> str:
    """Return `value` as a known logging level name, or `default`"""
    if value is None:
        return default
    name = value.strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return default


_RAW_LOG_LEVEL = os.getenv("LOG_LEVEL")
LOG_LEVEL = resolve_log_level(_RAW_LOG_LEVEL)
logging.basicConfig(
    level=LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

if _RAW_LOG_LEVEL is not None and _RAW_LOG_LEVEL.strip().upper() != LOG_LEVEL:
    logger.warning(
        f"Environment variable LOG_LEVEL ('{_RAW_LOG_LEVEL}') is not a valid logging level. Using {LOG_LEVEL}."
    )


# --- Environment helpers ---
def get_float_env(var_name: str) -> Optional[float]:
    value = os.getenv(var_name)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            logger.warning(
                f"Environment variable {var_name} ('{value}') is not a valid float. Ignoring."
            )
    return None


# --- Remote endpoints ---
IP_LOOKUP_URL = os.getenv("IP_LOOKUP_URL", "https://api.ipify.org")
GEO_LOOKUP_URL = os.getenv("GEO_LOOKUP_URL", "https://ipvigilante.com")
PASS_LOOKUP_URL = os.getenv(
    "PASS_LOOKUP_URL", "http://api.open-notify.org/iss-pass.json"
)

# None keeps aiohttp's own default timeout
HTTP_TIMEOUT_SECONDS = get_float_env("HTTP_TIMEOUT_SECONDS")


class EndpointSettings(BaseModel):
    """Remote lookup endpoints used by the three resolver services"""

    ip_lookup_url: str = Field(IP_LOOKUP_URL, description="Public IP lookup endpoint")
    geo_lookup_url: str = Field(
        GEO_LOOKUP_URL, description="IP geolocation endpoint, the IP is appended"
    )
    pass_lookup_url: str = Field(
        PASS_LOOKUP_URL, description="ISS pass-time endpoint, takes lat/lon query"
    )
    timeout_seconds: Optional[float] = Field(
        HTTP_TIMEOUT_SECONDS, description="Total timeout per request (seconds)"
    )


def get_endpoint_settings() -> EndpointSettings:
    settings = EndpointSettings()
    logger.debug(
        f"Endpoints: ip={settings.ip_lookup_url}, geo={settings.geo_lookup_url}, "
        f"pass={settings.pass_lookup_url}, timeout={settings.timeout_seconds}"
    )
    return settings
