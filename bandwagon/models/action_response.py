from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset

T = TypeVar("T", bound="ActionResponse")


@_attrs_define
class ActionResponse:
    """Reply to start, stop, kill, restart and basicShell/exec.

    Attributes:
        error (int): 0 on success, provider error code otherwise
        message (str | Unset): human-readable detail or command output
    """

    error: int
    message: str | Unset = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    @property
    def ok(self) -> bool:
        return self.error == 0

    def __str__(self) -> str:
        message = "" if isinstance(self.message, Unset) else self.message
        return f"error: {self.error}, message: {message}"

    def to_dict(self) -> dict[str, Any]:
        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update(
            {
                "error": self.error,
            }
        )
        if self.message is not UNSET:
            field_dict["message"] = self.message

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        error = int(d.pop("error"))

        message = d.pop("message", UNSET)
        if message is None:
            message = UNSET

        action_response = cls(
            error=error,
            message=message,
        )

        action_response.additional_properties = d
        return action_response

    @property
    def additional_keys(self) -> list[str]:
        return list(self.additional_properties.keys())

    def __getitem__(self, key: str) -> Any:
        return self.additional_properties[key]

    def __contains__(self, key: str) -> bool:
        return key in self.additional_properties
