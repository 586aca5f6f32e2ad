"""
HTTP transport for talking to Vault.

Provides the Transport protocol the role registry consumes, and a thin
wrapper around httpx.AsyncClient that implements it against a real server.
"""

from typing import Any, Dict, Optional, Protocol

import httpx
import structlog

from ..config import AppRoleConfig
from ..errors import TransportError

logger = structlog.get_logger(__name__)


class Transport(Protocol):
    """
    Request capability the role registry depends on.

    Implementations return the decoded JSON response (or None for an empty
    body) and raise on transport failure or non-2xx status.
    """

    async def issue(self, method: str, path: str, body: Optional[str] = None) -> Optional[Dict[str, Any]]:
        ...

    async def issue_list(self, path: str) -> Optional[Dict[str, Any]]:
        ...


class VaultHTTPTransport:
    """
    Wrapper around httpx.AsyncClient with Vault-specific configuration.

    This class provides:
    1. Base URL, token and namespace headers from AppRoleConfig
    2. The LIST verb Vault uses for collection reads
    3. Mapping of non-2xx responses to TransportError

    Requests are single-shot. Timeouts come from config; retries are left
    to the caller.

    Example:
        ```python
        config = AppRoleConfig()
        transport = VaultHTTPTransport.create(config)

        body = await transport.issue_list("/v1/auth/approle/role")
        ```
    """

    def __init__(self, config: AppRoleConfig, client: httpx.AsyncClient) -> None:
        """
        Initialize the transport.

        Args:
            config: AppRole client configuration
            client: Configured httpx.AsyncClient

        Note:
            Use VaultHTTPTransport.create() instead of direct instantiation.
        """
        self.config = config
        self._client = client

    @classmethod
    def create(
        cls,
        config: AppRoleConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "VaultHTTPTransport":
        """
        Create a transport for the configured Vault server.

        Args:
            config: AppRole client configuration
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)

        Returns:
            Initialized VaultHTTPTransport
        """
        headers = {
            "X-Vault-Token": config.token,
            "X-Vault-Request": "true",
        }
        if config.namespace:
            headers["X-Vault-Namespace"] = config.namespace

        client = httpx.AsyncClient(
            base_url=config.addr,
            headers=headers,
            timeout=config.timeout,
            verify=config.verify,
            transport=transport,
        )
        return cls(config=config, client=client)

    async def issue(self, method: str, path: str, body: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """
        Send a request and return the decoded JSON body.

        Args:
            method: HTTP verb ("GET", "POST", "LIST", ...)
            path: Request path, e.g. "/v1/auth/approle/role/ci-runner"
            body: Raw JSON request body, if any

        Returns:
            Decoded JSON object, or None when the response has no body

        Raises:
            TransportError: On connection failure, non-2xx status, or a
                response body that is not JSON
        """
        headers = {"Content-Type": "application/json"} if body is not None else None

        try:
            response = await self._client.request(method, path, content=body, headers=headers)
        except httpx.HTTPError as e:
            logger.warning("approle.http.request_failed", method=method, path=path, error=str(e))
            raise TransportError(
                f"{method} {path} failed: {e}",
                method=method,
                path=path,
            ) from e

        if not response.is_success:
            errors = self._extract_errors(response)
            logger.warning(
                "approle.http.bad_status",
                method=method,
                path=path,
                status_code=response.status_code,
                errors=errors,
            )
            raise TransportError(
                f"{method} {path} returned {response.status_code}: {errors}",
                method=method,
                path=path,
                status_code=response.status_code,
                errors=errors,
            )

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(
                f"{method} {path} returned a non-JSON body",
                method=method,
                path=path,
                status_code=response.status_code,
            ) from e

    async def issue_list(self, path: str) -> Optional[Dict[str, Any]]:
        """
        Send a LIST request.

        Args:
            path: Collection path, e.g. "/v1/auth/approle/role"

        Returns:
            Decoded JSON object, or None when the response has no body
        """
        return await self.issue("LIST", path)

    @staticmethod
    def _extract_errors(response: httpx.Response) -> list:
        """Pull Vault's errors array out of an error response."""
        try:
            payload = response.json()
        except ValueError:
            return [response.text] if response.text else []
        if isinstance(payload, dict):
            return list(payload.get("errors") or [])
        return []

    async def close(self) -> None:
        """Close the underlying httpx client."""
        await self._client.aclose()

    async def __aenter__(self) -> "VaultHTTPTransport":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
