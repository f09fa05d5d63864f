from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any, TypeVar

import attrs
from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset

T = TypeVar("T", bound="ServiceInfo")

GIB = 1024 * 1024 * 1024
RESET_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@_attrs_define
class ServiceInfo:
    """Payload of /v1/getServiceInfo.

    Keys missing from the payload stay UNSET and are left out of to_dict();
    JSON nulls are kept as None.

    Attributes:
        vm_type (str | Unset): virtualization type, e.g. "kvm"
        hostname (str | Unset):
        node_ip (str | Unset):
        node_alias (str | Unset):
        node_location (str | Unset):
        node_location_id (str | Unset):
        node_datacenter (str | Unset):
        location_ipv6_ready (bool | Unset):
        plan (str | Unset):
        plan_monthly_data (int | Unset): bytes per month
        monthly_data_multiplier (int | Unset):
        plan_disk (int | Unset): bytes
        plan_ram (int | Unset): bytes
        plan_swap (int | Unset): bytes
        plan_max_ipv6s (int | Unset):
        os (str | Unset):
        email (str | Unset):
        data_counter (int | None | Unset): bytes used in the current period
        data_next_reset (int | None | Unset): unix timestamp of the counter reset
        ip_addresses (list[str] | Unset):
        private_ip_addresses (list[str] | Unset):
        ip_nullroutes (list[str] | Unset):
        iso1 (str | None | Unset):
        iso2 (str | None | Unset):
        available_isos (list[str] | Unset):
        plan_private_network_available (bool | Unset):
        location_private_network_available (bool | Unset):
        rdns_api_available (bool | Unset):
        ptr (dict[str, str] | Unset): reverse DNS records keyed by address
        suspended (bool | Unset):
        policy_violation (bool | Unset):
        suspension_count (int | None | Unset):
        total_abuse_points (int | Unset):
        max_abuse_points (int | Unset):
        error (int | Unset):
    """

    vm_type: str | Unset = UNSET
    hostname: str | Unset = UNSET
    node_ip: str | Unset = UNSET
    node_alias: str | Unset = UNSET
    node_location: str | Unset = UNSET
    node_location_id: str | Unset = UNSET
    node_datacenter: str | Unset = UNSET
    location_ipv6_ready: bool | Unset = UNSET
    plan: str | Unset = UNSET
    plan_monthly_data: int | Unset = UNSET
    monthly_data_multiplier: int | Unset = UNSET
    plan_disk: int | Unset = UNSET
    plan_ram: int | Unset = UNSET
    plan_swap: int | Unset = UNSET
    plan_max_ipv6s: int | Unset = UNSET
    os: str | Unset = UNSET
    email: str | Unset = UNSET
    data_counter: int | None | Unset = UNSET
    data_next_reset: int | None | Unset = UNSET
    ip_addresses: list[str] | Unset = UNSET
    private_ip_addresses: list[str] | Unset = UNSET
    ip_nullroutes: list[str] | Unset = UNSET
    iso1: str | None | Unset = UNSET
    iso2: str | None | Unset = UNSET
    available_isos: list[str] | Unset = UNSET
    plan_private_network_available: bool | Unset = UNSET
    location_private_network_available: bool | Unset = UNSET
    rdns_api_available: bool | Unset = UNSET
    ptr: dict[str, str] | Unset = UNSET
    suspended: bool | Unset = UNSET
    policy_violation: bool | Unset = UNSET
    suspension_count: int | None | Unset = UNSET
    total_abuse_points: int | Unset = UNSET
    max_abuse_points: int | Unset = UNSET
    error: int | Unset = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    @property
    def ipv4(self) -> str:
        """First assigned address, or an empty string."""
        if not self.ip_addresses:
            return ""
        return str(self.ip_addresses[0])

    @property
    def reset_time(self) -> str:
        """Local time of the next bandwidth counter reset."""
        if self.data_next_reset is None or isinstance(self.data_next_reset, Unset):
            return ""
        return datetime.fromtimestamp(self.data_next_reset).strftime(RESET_TIME_FORMAT)

    @property
    def data_counter_gb(self) -> int:
        if self.data_counter is None or isinstance(self.data_counter, Unset):
            return 0
        return self.data_counter // GIB

    def __str__(self) -> str:
        return (
            f"IP Address: {self.ipv4}, "
            f"Bandwidth Usage: {self.data_counter_gb} GB, "
            f"Reset time: {self.reset_time}"
        )

    def to_dict(self) -> dict[str, Any]:
        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        for field in attrs.fields(type(self)):
            if field.name == "additional_properties":
                continue
            value = getattr(self, field.name)
            if value is not UNSET:
                field_dict[field.name] = value

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        kwargs: dict[str, Any] = {}
        for field in attrs.fields(cls):
            if field.name == "additional_properties":
                continue
            kwargs[field.name] = d.pop(field.name, UNSET)

        service_info = cls(**kwargs)

        service_info.additional_properties = d
        return service_info

    @property
    def additional_keys(self) -> list[str]:
        return list(self.additional_properties.keys())

    def __getitem__(self, key: str) -> Any:
        return self.additional_properties[key]

    def __contains__(self, key: str) -> bool:
        return key in self.additional_properties
