"""
Satellite domain module

ISS pass-time lookup and the orchestration that chains it after the
location lookups.
"""

from issflyover.domains.satellite.models.pass_model import PassWindow
from issflyover.domains.satellite.interfaces.pass_time_service_interface import (
    PassTimeServiceInterface,
)
from issflyover.domains.satellite.services.pass_time_service import PassTimeService
from issflyover.domains.satellite.services.flyover_service import FlyoverService
