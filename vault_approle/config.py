"""
AppRole client configuration management.

Loads configuration from environment variables or .env file.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppRoleConfig(BaseSettings):
    """
    AppRole client configuration settings.

    Can be loaded from:
    1. Environment variables (VAULT_ADDR, VAULT_TOKEN, etc.)
    2. .env file in project root
    3. Direct instantiation with kwargs

    Example:
        ```python
        # From environment
        config = AppRoleConfig()

        # Direct instantiation
        config = AppRoleConfig(
            addr="https://vault.example.com:8200",
            token="hvs.your-token"
        )
        ```
    """

    model_config = SettingsConfigDict(
        env_prefix="VAULT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Vault connection
    addr: str = Field(
        ...,
        description="Vault server address (e.g., https://vault.example.com:8200)",
    )

    token: str = Field(
        ...,
        description="Vault token with rights to manage AppRole roles",
    )

    # Enterprise namespace
    namespace: Optional[str] = Field(
        default=None,
        description="Vault namespace sent as X-Vault-Namespace",
    )

    # Where the AppRole auth method is mounted
    mount_path: str = Field(
        default="approle",
        description="Mount path of the AppRole auth method (auth/<mount_path>)",
    )

    # HTTP settings
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="Request timeout in seconds",
    )

    verify: bool = Field(
        default=True,
        description="Verify the server TLS certificate",
    )

    # Debug
    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    @field_validator("addr")
    @classmethod
    def validate_addr(cls, v: str) -> str:
        """Ensure Vault address is an http(s) URL."""
        if not v.startswith(("https://", "http://")):
            raise ValueError("addr must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("token")
    @classmethod
    def validate_token(cls, v: str) -> str:
        """Ensure Vault token is not empty."""
        if not v.strip():
            raise ValueError("token must not be empty")
        return v

    @field_validator("mount_path")
    @classmethod
    def validate_mount_path(cls, v: str) -> str:
        """Strip surrounding slashes from the mount path."""
        v = v.strip("/")
        if not v:
            raise ValueError("mount_path must not be empty")
        return v


def load_config(**kwargs) -> AppRoleConfig:
    """
    Load AppRole client configuration.

    Priority order:
    1. Keyword arguments
    2. Environment variables (VAULT_*)
    3. .env file

    Args:
        **kwargs: Override configuration values

    Returns:
        AppRoleConfig instance

    Raises:
        ValidationError: If required fields are missing or invalid

    Example:
        ```python
        # Load from environment
        config = load_config()

        # Override specific values
        config = load_config(debug=True)
        ```
    """
    return AppRoleConfig(**kwargs)
