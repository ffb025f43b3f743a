from pydantic import BaseModel, Field


class IpLookupResponse(BaseModel):
    """Body of the public IP lookup, `{"ip": "..."}`"""

    ip: str = Field(..., description="Caller's public address, e.g. 162.245.144.188")


class GeoLookupData(BaseModel):
    latitude: float = Field(..., description="Latitude reported for the address")
    longitude: float = Field(..., description="Longitude reported for the address")


class GeoLookupResponse(BaseModel):
    """Body of the IP geolocation lookup, only the `data` block is read"""

    data: GeoLookupData
