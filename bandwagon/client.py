from __future__ import annotations

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from .config import DEFAULT_BASE_URL
from .race import DEFAULT_DEADLINE, DEFAULT_FANOUT, race, race_sync
from .transport import ClientFactory, make_async_client
from .types import Credentials, RequestTemplate


def _strip_slash(value: str) -> str:
    return value.rstrip("/")


@_attrs_define
class Client:
    """A client for the KiwiVM control API

    Every call is sent as a race of ``fanout`` duplicate GET requests; see
    ``bandwagon.race``.

    Attributes:
        credentials: ``veid`` / ``api_key`` pair appended to every request.

        base_url: The API root, e.g. ``https://api.64clouds.com``.

        fanout: Number of duplicate attempts per call.

        deadline: Race-wide limit in seconds.

        fail_fast: Raise ``errors.AllAttemptsFailed`` as soon as every attempt
            failed instead of waiting for the deadline.

        raise_on_api_error: Whether or not to raise an ``errors.ApiError`` when
            the API answers with a non-zero ``error`` code. The default is to
            return the parsed response.

        client_factory: Zero-argument callable returning a fresh
            ``httpx.AsyncClient`` for each attempt.
    """

    credentials: Credentials
    base_url: str = _attrs_field(default=DEFAULT_BASE_URL, converter=_strip_slash)
    fanout: int = _attrs_field(default=DEFAULT_FANOUT, kw_only=True)
    deadline: float = _attrs_field(default=DEFAULT_DEADLINE, kw_only=True)
    fail_fast: bool = _attrs_field(default=False, kw_only=True)
    raise_on_api_error: bool = _attrs_field(default=False, kw_only=True)
    client_factory: ClientFactory = _attrs_field(default=make_async_client, kw_only=True)

    def template(self, path: str, **params: str) -> RequestTemplate:
        """Build the request for an endpoint; credentials go after ``params``."""
        return RequestTemplate(
            url=f"{self.base_url}/{path.lstrip('/')}",
            params=(*((k, str(v)) for k, v in params.items()), *self.credentials.as_params()),
        )

    async def race(self, template: RequestTemplate) -> bytes:
        return await race(
            template,
            self.fanout,
            deadline=self.deadline,
            fail_fast=self.fail_fast,
            client_factory=self.client_factory,
        )

    def race_sync(self, template: RequestTemplate) -> bytes:
        return race_sync(
            template,
            self.fanout,
            deadline=self.deadline,
            fail_fast=self.fail_fast,
            client_factory=self.client_factory,
        )
