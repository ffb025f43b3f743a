from enum import Enum
from typing import Optional


class FlyoverStage(str, Enum):
    """Lookup stages of the fly-over pipeline, in execution order"""

    ADDRESS = "address"
    COORDINATES = "coordinates"
    PASS_TIMES = "pass_times"


class FlyoverError(Exception):
    """Base class for every failure surfaced by a lookup stage

    Attributes:
        stage: the stage that produced the error
    """

    def __init__(self, message: str, stage: Optional[FlyoverStage] = None):
        super().__init__(message)
        self.message = message
        self.stage = stage


class TransportError(FlyoverError):
    """Connection, DNS or timeout failure before a response was received"""

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        stage: Optional[FlyoverStage] = None,
    ):
        super().__init__(message, stage)
        self.cause = cause


class RemoteServiceError(FlyoverError):
    """The remote service answered with a non-2xx status"""

    def __init__(
        self,
        message: str,
        status: int,
        body: str,
        stage: Optional[FlyoverStage] = None,
    ):
        super().__init__(message, stage)
        self.status = status
        self.body = body


class DecodeError(FlyoverError):
    """The response body is not JSON or lacks the expected fields"""

    def __init__(
        self, message: str, body: str = "", stage: Optional[FlyoverStage] = None
    ):
        super().__init__(message, stage)
        self.body = body


class InvalidCoordinatesError(FlyoverError):
    """Latitude or longitude outside the valid geographic range"""

    def __init__(
        self,
        latitude: float,
        longitude: float,
        stage: Optional[FlyoverStage] = None,
    ):
        super().__init__(
            f"Coordinates out of range: latitude={latitude}, longitude={longitude}",
            stage,
        )
        self.latitude = latitude
        self.longitude = longitude
