"""
KiwiVM (BandwagonHost) API Client

Every call is sent as a race of duplicate GET requests; the first complete
response wins.

Usage:
    from bandwagon import BandwagonClient

    client = BandwagonClient.from_env()
    info = client.info()
    client.command("uptime")
"""

from .client import Client
from .errors import AllAttemptsFailed, ApiError, BandwagonError, RaceTimeout, ResponseDecodeError
from .types import Credentials, RequestTemplate
from .vps import BandwagonClient

__all__ = (
    "AllAttemptsFailed",
    "ApiError",
    "BandwagonClient",
    "BandwagonError",
    "Client",
    "Credentials",
    "RaceTimeout",
    "RequestTemplate",
    "ResponseDecodeError",
)
