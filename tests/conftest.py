"""
Pytest configuration and fixtures for vault-approle tests.

Provides a mock transport and test fixtures.
"""

from unittest.mock import AsyncMock

import pytest

from vault_approle.client import AppRoleClient
from vault_approle.config import AppRoleConfig
from vault_approle.roles.registry import RoleRegistry


@pytest.fixture(autouse=True)
def clean_vault_env(monkeypatch):
    """Keep the developer's VAULT_* environment out of the tests."""
    for key in ("VAULT_ADDR", "VAULT_TOKEN", "VAULT_NAMESPACE", "VAULT_MOUNT_PATH", "VAULT_DEBUG"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def mock_transport():
    """Create a mock transport exposing issue() and issue_list()."""
    transport = AsyncMock()
    transport.issue = AsyncMock(return_value=None)
    transport.issue_list = AsyncMock(return_value={"data": {"keys": []}})
    transport.close = AsyncMock()
    return transport


@pytest.fixture
def app_config():
    """Create a test AppRoleConfig."""
    return AppRoleConfig(
        addr="https://vault.test:8200",
        token="hvs.test-token",
        debug=True,
    )


@pytest.fixture
def registry(mock_transport):
    """Create a RoleRegistry over the mock transport."""
    return RoleRegistry(mock_transport)


@pytest.fixture
def client(app_config, mock_transport):
    """Create a test AppRoleClient."""
    return AppRoleClient(config=app_config, transport=mock_transport)


@pytest.fixture
def sample_role_fields():
    """Create sample role fields covering every option."""
    return {
        "name": "ci-runner",
        "require_secret_id": True,
        "secret_id_bound_cidrs": ["10.0.0.0/16"],
        "secret_id_max_uses": 10,
        "secret_id_ttl": 600,
        "local_secret_ids": True,
        "token_ttl": 3600,
        "token_max_ttl": "4h",
        "token_explicit_max_ttl": "8h",
        "token_period": "30m",
        "token_policies": ["ci-read", "ci-write"],
        "token_bound_cidrs": ["192.168.1.0/24"],
        "token_no_default_policy": True,
        "token_num_uses": 5,
        "token_type": "service",
    }
