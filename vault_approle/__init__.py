"""
vault-approle - Typed async client for Vault's AppRole auth method.

Example:
    ```python
    from datetime import timedelta

    from vault_approle import AppRoleClient, RoleOptions

    async with await AppRoleClient.create() as client:
        await client.roles.create_or_update(
            RoleOptions(
                name="ci-runner",
                token_ttl=timedelta(hours=1),
                token_policies=["ci-read"],
            )
        )
        names = await client.roles.list()
    ```
"""

from .client import AppRoleClient
from .config import AppRoleConfig, load_config
from .errors import (
    AppRoleError,
    EncodingFailedError,
    InvalidInputError,
    ListFailedError,
    OperationError,
    TransportError,
    WriteFailedError,
)
from .roles import RoleOptions, RoleRegistry, TokenType
from .utils.http import Transport, VaultHTTPTransport

__version__ = "0.1.0"

__all__ = [
    # Main client
    "AppRoleClient",
    "AppRoleConfig",
    "load_config",
    # Roles
    "RoleRegistry",
    "RoleOptions",
    "TokenType",
    # Transport
    "Transport",
    "VaultHTTPTransport",
    # Errors
    "AppRoleError",
    "InvalidInputError",
    "EncodingFailedError",
    "OperationError",
    "ListFailedError",
    "WriteFailedError",
    "TransportError",
]
