"""
KiwiVM control API client

Wrapper around the endpoint modules that handles credentials and race
settings.

Usage:
    from bandwagon.vps import BandwagonClient

    client = BandwagonClient.from_env()
    print(client.info())
    client.reboot()
"""

from pathlib import Path
from typing import Optional

from .api.vps import basic_shell_exec, get_service_info, kill, restart, start, stop
from .client import Client
from .config import DEFAULT_BASE_URL, Settings, get_settings
from .models import ActionResponse, ServiceInfo
from .race import DEFAULT_DEADLINE, DEFAULT_FANOUT
from .transport import ATTEMPT_TIMEOUT, client_factory
from .types import Credentials, load_credentials_file
from .utils.logging import get_logger

logger = get_logger(__name__, prefix="Bandwagon")


class BandwagonClient:
    """
    Synchronous client for one VPS.

    Handles:
    - Credential loading from the environment or a credentials file
    - Race settings (fan-out, deadline, fail-fast)
    - Convenience methods for every control endpoint
    """

    def __init__(
        self,
        credentials: Credentials,
        base_url: str = DEFAULT_BASE_URL,
        fanout: int = DEFAULT_FANOUT,
        deadline: float = DEFAULT_DEADLINE,
        fail_fast: bool = False,
        raise_on_api_error: bool = False,
        attempt_timeout: float = ATTEMPT_TIMEOUT,
    ):
        self.credentials = credentials
        self._client = Client(
            credentials,
            base_url,
            fanout=fanout,
            deadline=deadline,
            fail_fast=fail_fast,
            raise_on_api_error=raise_on_api_error,
            client_factory=client_factory(attempt_timeout),
        )

    @property
    def client(self) -> Client:
        """Low-level client, for the ``asyncio`` endpoint functions."""
        return self._client

    @classmethod
    def from_settings(cls, settings: Settings) -> "BandwagonClient":
        """
        Create a client from loaded settings.

        Credential priority:
        1. BANDWAGON_VEID / BANDWAGON_API_KEY
        2. BANDWAGON_CREDENTIALS_FILE (YAML or JSON)
        """
        veid = settings.BANDWAGON_VEID
        api_key = settings.BANDWAGON_API_KEY

        if not (veid and api_key) and settings.BANDWAGON_CREDENTIALS_FILE:
            from_file = load_credentials_file(Path(settings.BANDWAGON_CREDENTIALS_FILE))
            veid = veid or from_file.get("veid", "")
            api_key = api_key or from_file.get("api_key", "")

        if not veid or not api_key:
            raise ValueError(
                "No credentials found. Set BANDWAGON_VEID and BANDWAGON_API_KEY "
                "or point BANDWAGON_CREDENTIALS_FILE at a credentials file"
            )

        logger.debug(
            f"Using veid {veid} against {settings.BANDWAGON_BASE_URL} "
            f"(fanout={settings.BANDWAGON_FANOUT}, deadline={settings.deadline:.3f}s)"
        )

        return cls(
            Credentials(veid=veid, api_key=api_key),
            base_url=settings.BANDWAGON_BASE_URL,
            fanout=settings.BANDWAGON_FANOUT,
            deadline=settings.deadline,
            fail_fast=settings.BANDWAGON_FAIL_FAST,
            raise_on_api_error=settings.BANDWAGON_RAISE_ON_API_ERROR,
            attempt_timeout=settings.BANDWAGON_ATTEMPT_TIMEOUT,
        )

    @classmethod
    def from_env(cls, settings: Optional[Settings] = None) -> "BandwagonClient":
        """Create client from environment variables and .env."""
        return cls.from_settings(settings or get_settings())

    # =========================================================================
    # Control endpoints
    # =========================================================================

    def info(self) -> ServiceInfo:
        return get_service_info.sync(client=self._client)

    def start(self) -> ActionResponse:
        return start.sync(client=self._client)

    def stop(self) -> ActionResponse:
        return stop.sync(client=self._client)

    def kill(self) -> ActionResponse:
        return kill.sync(client=self._client)

    def reboot(self) -> ActionResponse:
        return restart.sync(client=self._client)

    def command(self, command: str) -> ActionResponse:
        """Run a shell command through basicShell/exec."""
        logger.info(f"Executing command on {self.credentials.veid}: {command}")
        return basic_shell_exec.sync(command, client=self._client)
