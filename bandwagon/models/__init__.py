"""Contains all the data models used in inputs/outputs"""

from .action_response import ActionResponse
from .service_info import ServiceInfo

__all__ = (
    "ActionResponse",
    "ServiceInfo",
)
