"""
Main AppRole client.

This is the primary interface users interact with.
"""

from typing import Optional

from .config import AppRoleConfig, load_config
from .logging import configure_logging
from .roles import RoleRegistry
from .utils.http import Transport, VaultHTTPTransport


class AppRoleClient:
    """
    Main client for Vault's AppRole auth method.

    Example:
        ```python
        from vault_approle import AppRoleClient

        # Initialize from environment variables
        client = await AppRoleClient.create()

        # Or with explicit config
        client = await AppRoleClient.create(
            addr="https://vault.example.com:8200",
            token="hvs.your-token"
        )

        await client.roles.create_or_update(name="ci-runner", token_ttl=3600)
        names = await client.roles.list()
        ```
    """

    def __init__(self, config: AppRoleConfig, transport: Transport) -> None:
        """
        Initialize AppRole client.

        Args:
            config: AppRole client configuration
            transport: Transport used for every request

        Note:
            Use AppRoleClient.create() instead of direct instantiation.
        """
        self.config = config
        self.transport = transport

        self.roles = RoleRegistry(transport, mount_path=config.mount_path)

    @classmethod
    async def create(
        cls,
        addr: Optional[str] = None,
        token: Optional[str] = None,
        **kwargs,
    ) -> "AppRoleClient":
        """
        Create and initialize an AppRole client.

        Args:
            addr: Vault server address (optional, loads from env)
            token: Vault token (optional, loads from env)
            **kwargs: Additional configuration options

        Returns:
            Initialized AppRoleClient

        Raises:
            ValidationError: If required configuration is missing or invalid
        """
        config_kwargs = kwargs.copy()
        if addr:
            config_kwargs["addr"] = addr
        if token:
            config_kwargs["token"] = token

        config = load_config(**config_kwargs)
        configure_logging(config.debug)

        transport = VaultHTTPTransport.create(config)

        return cls(config=config, transport=transport)

    async def close(self) -> None:
        """Close the transport, if it owns resources."""
        close = getattr(self.transport, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "AppRoleClient":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
