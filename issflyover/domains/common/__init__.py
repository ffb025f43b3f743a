"""
Shared domain module

Models, errors and adapters used by every domain.
"""

from issflyover.domains.common.models.base_model import (
    DomainBaseModel,
    ValueObject,
)
from issflyover.domains.common.exceptions import (
    FlyoverStage,
    FlyoverError,
    TransportError,
    RemoteServiceError,
    DecodeError,
    InvalidCoordinatesError,
)
from issflyover.domains.common.value_objects.coordinate import Coordinates
from issflyover.domains.common.adapters.http_json_client import HttpJsonClient
