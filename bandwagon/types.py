"""Contains some shared types for properties"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal, TypeVar

import httpx
import yaml
from attrs import define as _attrs_define
from attrs import field as _attrs_field


class Unset:
    def __bool__(self) -> Literal[False]:
        return False


UNSET: Unset = Unset()

Params = tuple[tuple[str, str], ...]

T = TypeVar("T", bound="Credentials")


def _freeze_params(value: Mapping[str, Any] | Params | None) -> Params:
    if value is None:
        return ()
    items = value.items() if isinstance(value, Mapping) else value
    return tuple((str(key), str(val)) for key, val in items)


@_attrs_define(frozen=True)
class RequestTemplate:
    """Immutable description of one idempotent GET.

    Every race attempt builds its own ``httpx.Request`` from the template,
    so a template can be shared by any number of concurrent attempts.

    Attributes:
        url (str): absolute URL without query string
        params (Params): ordered query parameters
    """

    url: str
    params: Params = _attrs_field(default=(), converter=_freeze_params)
    method: str = _attrs_field(default="GET", init=False)

    def build_request(self, client: httpx.AsyncClient) -> httpx.Request:
        return client.build_request(self.method, self.url, params=list(self.params))


@_attrs_define(frozen=True, repr=False)
class Credentials:
    """
    Attributes:
        veid (str): VPS / account identifier
        api_key (str): API key issued in the control panel
    """

    veid: str
    api_key: str

    def as_params(self) -> Params:
        return (("veid", self.veid), ("api_key", self.api_key))

    def __repr__(self) -> str:
        return f"Credentials(veid={self.veid!r}, api_key='***')"

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        veid = src_dict.get("veid")
        api_key = src_dict.get("api_key")
        if veid in (None, "") or api_key in (None, ""):
            raise ValueError("Credentials require both 'veid' and 'api_key'")
        return cls(veid=str(veid), api_key=str(api_key))

    @classmethod
    def from_file(cls: type[T], path: str | Path) -> T:
        """Load credentials from a YAML (or JSON) file with ``veid`` and ``api_key`` keys."""
        return cls.from_dict(load_credentials_file(path))


def load_credentials_file(path: str | Path) -> dict[str, str]:
    """
    Read a YAML (or JSON) credentials file.

    Either key may be missing; callers merging several sources check
    completeness themselves.
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"Credentials file {path} must contain a mapping")
    return {
        key: str(data[key])
        for key in ("veid", "api_key")
        if data.get(key) not in (None, "")
    }


__all__ = ["UNSET", "Unset", "Params", "RequestTemplate", "Credentials", "load_credentials_file"]
