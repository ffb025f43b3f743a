from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from issflyover.domains.common.models.base_model import ValueObject


class PassWindow(ValueObject):
    """One predicted overhead pass of the ISS"""

    risetime: int = Field(..., gt=0, description="Rise time, Unix epoch seconds")
    duration: int = Field(..., gt=0, description="Visible duration in seconds")

    def rise_datetime(self) -> datetime:
        """Rise time as an aware datetime in the local timezone"""
        return datetime.fromtimestamp(self.risetime).astimezone()


class PassLookupResponse(BaseModel):
    """Body of the pass-time lookup, only `response` is read"""

    response: List[PassWindow]
