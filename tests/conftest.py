"""
Pytest configuration and shared fixtures for bandwagon tests.

This file provides common test fixtures:
- Credentials and low-level clients
- Fake per-attempt transports built on httpx.MockTransport
"""

from typing import Callable

import pytest

from bandwagon.client import Client
from bandwagon.types import Credentials

from tests.fakes import FakeFactory, Handler, answer

# =============================================================================
# Fake transports
# =============================================================================

@pytest.fixture
def make_factory() -> Callable[[Handler], FakeFactory]:
    """Build a FakeFactory from an async handler."""
    return FakeFactory


@pytest.fixture
def ok_factory(make_factory) -> FakeFactory:
    """Every attempt answers {"error":0} immediately."""
    return make_factory(answer(b'{"error":0}'))


# =============================================================================
# Client fixtures
# =============================================================================

@pytest.fixture
def credentials() -> Credentials:
    return Credentials(veid="123456", api_key="private_test_key")


@pytest.fixture
def api_client(credentials, ok_factory) -> Client:
    """Client with a short deadline and a fake transport."""
    return Client(
        credentials,
        "https://api.test",
        fanout=3,
        deadline=0.5,
        client_factory=ok_factory,
    )


@pytest.fixture
def sample_service_info():
    """getServiceInfo payload as returned by the API."""
    return {
        "vm_type": "kvm",
        "hostname": "box.example.com",
        "node_ip": "203.0.113.7",
        "node_alias": "v1234",
        "node_location": "US, California",
        "node_location_id": "USCA_6",
        "node_datacenter": "US: Los Angeles, California (DC6 CN2GIA-E)",
        "location_ipv6_ready": True,
        "plan": "kvmv5-20g-1g-1t-ca-cn2gia",
        "plan_monthly_data": 1099511627776,
        "monthly_data_multiplier": 1,
        "plan_disk": 21474836480,
        "plan_ram": 1073741824,
        "plan_swap": 0,
        "plan_max_ipv6s": 0,
        "os": "ubuntu-22.04-x86_64",
        "email": "owner@example.com",
        "data_counter": 5 * 1024 * 1024 * 1024 + 12345,
        "data_next_reset": 1700000000,
        "ip_addresses": ["198.51.100.10", "198.51.100.11"],
        "private_ip_addresses": [],
        "ip_nullroutes": [],
        "iso1": None,
        "iso2": None,
        "available_isos": ["ubuntu-22.04.iso"],
        "plan_private_network_available": False,
        "location_private_network_available": False,
        "rdns_api_available": True,
        "ptr": {"198.51.100.10": "box.example.com"},
        "suspended": False,
        "policy_violation": False,
        "suspension_count": None,
        "total_abuse_points": 0,
        "max_abuse_points": 1000,
        "error": 0,
        "ve_status": "Running",
    }


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Pytest configuration hook."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running (waits out a full race deadline)"
    )
