"""
Tests for vault_approle.utils.http module.
"""

import json

import httpx
import pytest

from vault_approle.config import AppRoleConfig
from vault_approle.errors import TransportError
from vault_approle.utils.http import VaultHTTPTransport


def make_transport(handler, **config_overrides) -> VaultHTTPTransport:
    """Build a VaultHTTPTransport whose requests go to handler."""
    config = AppRoleConfig(
        addr="https://vault.test:8200",
        token="hvs.test-token",
        **config_overrides,
    )
    return VaultHTTPTransport.create(config, transport=httpx.MockTransport(handler))


class TestVaultHTTPTransport:
    """Tests for VaultHTTPTransport class."""

    @pytest.mark.asyncio
    async def test_issue_list_sends_list_verb(self):
        """Test LIST requests carry the token and return decoded JSON."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["token"] = request.headers.get("X-Vault-Token")
            seen["namespace"] = request.headers.get("X-Vault-Namespace")
            return httpx.Response(200, json={"data": {"keys": ["b", "a"]}})

        async with make_transport(handler) as transport:
            response = await transport.issue_list("/v1/auth/approle/role")

        assert response == {"data": {"keys": ["b", "a"]}}
        assert seen["method"] == "LIST"
        assert seen["url"] == "https://vault.test:8200/v1/auth/approle/role"
        assert seen["token"] == "hvs.test-token"
        assert seen["namespace"] is None

    @pytest.mark.asyncio
    async def test_namespace_header(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["namespace"] = request.headers.get("X-Vault-Namespace")
            return httpx.Response(204)

        async with make_transport(handler, namespace="team-a") as transport:
            await transport.issue("POST", "/v1/auth/approle/role/web", "{}")

        assert seen["namespace"] == "team-a"

    @pytest.mark.asyncio
    async def test_issue_post_body(self):
        """Test the raw JSON body is sent unchanged."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            seen["content_type"] = request.headers.get("Content-Type")
            return httpx.Response(204)

        body = json.dumps({"role_name": "web", "token_ttl": 60})
        async with make_transport(handler) as transport:
            response = await transport.issue("POST", "/v1/auth/approle/role/web", body)

        assert response is None
        assert seen["method"] == "POST"
        assert seen["path"] == "/v1/auth/approle/role/web"
        assert seen["body"] == {"role_name": "web", "token_ttl": 60}
        assert seen["content_type"] == "application/json"

    @pytest.mark.asyncio
    async def test_non_success_status(self):
        """Test non-2xx responses raise TransportError with Vault's errors."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(403, json={"errors": ["permission denied"]})

        async with make_transport(handler) as transport:
            with pytest.raises(TransportError) as exc_info:
                await transport.issue_list("/v1/auth/approle/role")

        error = exc_info.value
        assert error.status_code == 403
        assert error.errors == ["permission denied"]
        assert error.method == "LIST"
        assert error.path == "/v1/auth/approle/role"

    @pytest.mark.asyncio
    async def test_non_json_error_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad Gateway")

        async with make_transport(handler) as transport:
            with pytest.raises(TransportError) as exc_info:
                await transport.issue("POST", "/v1/auth/approle/role/web", "{}")

        assert exc_info.value.status_code == 502
        assert exc_info.value.errors == ["Bad Gateway"]

    @pytest.mark.asyncio
    async def test_connection_error(self):
        """Test httpx errors are chained into TransportError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with make_transport(handler) as transport:
            with pytest.raises(TransportError) as exc_info:
                await transport.issue_list("/v1/auth/approle/role")

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_invalid_json_success_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>")

        async with make_transport(handler) as transport:
            with pytest.raises(TransportError):
                await transport.issue_list("/v1/auth/approle/role")
