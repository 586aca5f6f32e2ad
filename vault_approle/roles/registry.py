"""
Role management for AppRole.

Lists and upserts roles under auth/<mount>/role. Other AppRole endpoints
(read/delete role, role ID, secret ID lifecycle, login, tidy) are not
covered yet; see https://developer.hashicorp.com/vault/api-docs/auth/approle
"""

from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Union

import structlog
from pydantic import BaseModel, ValidationError

from ..errors import EncodingFailedError, InvalidInputError, ListFailedError, WriteFailedError
from .models import RoleOptions, validate_role_name

if TYPE_CHECKING:
    from ..utils.http import Transport

logger = structlog.get_logger(__name__)


class _RoleKeys(BaseModel):
    keys: List[str]


class _RoleListResponse(BaseModel):
    """Shape of a LIST auth/<mount>/role response."""

    data: _RoleKeys


class RoleRegistry:
    """
    Registry for AppRole role operations.

    Stateless: every call is one request through the injected transport.
    Nothing is cached and nothing is retried.

    Example:
        ```python
        client = await AppRoleClient.create()

        # Create or update a role
        await client.roles.create_or_update(
            name="ci-runner",
            token_ttl=3600,
            token_policies=["ci-read"],
        )

        # List role names, sorted
        names = await client.roles.list()
        ```
    """

    def __init__(self, transport: "Transport", mount_path: str = "approle") -> None:
        """
        Initialize RoleRegistry.

        Args:
            transport: Object exposing issue() and issue_list()
            mount_path: Mount path of the AppRole auth method
        """
        self.transport = transport
        self.base_path = f"/v1/auth/{mount_path.strip('/')}/role"

    def role_path(self, name: str) -> str:
        """Request path for a single role."""
        return f"{self.base_path}/{name}"

    async def list(self) -> List[str]:
        """
        List role names.

        Returns:
            Role names sorted ascending; Vault does not guarantee an order

        Raises:
            ListFailedError: On transport failure, non-2xx status or a
                malformed response body
        """
        path = self.base_path
        logger.debug("approle.role.list", path=path)

        try:
            response = await self.transport.issue_list(path)
        except Exception as e:
            raise ListFailedError(f"failed to list roles at {path!r}: {e}", path=path, cause=e) from e

        try:
            parsed = _RoleListResponse.model_validate(response)
        except ValidationError as e:
            raise ListFailedError(
                f"failed to list roles at {path!r}: malformed response",
                path=path,
                cause=e,
            ) from e

        return sorted(parsed.data.keys)

    async def create_or_update(
        self,
        options: Optional[Union[RoleOptions, Mapping[str, Any]]] = None,
        **fields: Any,
    ) -> None:
        """
        Create a role, or replace it if it already exists.

        Args:
            options: RoleOptions, or a mapping of role fields
            **fields: Role fields, used when options is not given

        Raises:
            InvalidInputError: If the options fail validation (no request is sent)
            EncodingFailedError: If the options cannot be serialized
            WriteFailedError: If the transport fails or Vault rejects the write

        Example:
            ```python
            await client.roles.create_or_update(
                RoleOptions(name="ci-runner", token_ttl=timedelta(hours=1))
            )
            await client.roles.create_or_update(name="batch-jobs", token_type="batch")
            ```
        """
        role = self._coerce_options(options, fields)
        validate_role_name(role.name)

        path = self.role_path(role.name)
        try:
            body = role.to_json()
        except EncodingFailedError as e:
            raise EncodingFailedError(f"encoding role for {path!r}: {e}", path=path) from e
        logger.debug("approle.role.write", path=path, body=body)

        try:
            await self.transport.issue("POST", path, body)
        except Exception as e:
            raise WriteFailedError(f"creating role at {path!r}: {e}", path=path, cause=e) from e

    @staticmethod
    def _coerce_options(
        options: Optional[Union[RoleOptions, Mapping[str, Any]]],
        fields: Mapping[str, Any],
    ) -> RoleOptions:
        """Turn the accepted argument forms into RoleOptions."""
        if isinstance(options, RoleOptions):
            if fields:
                raise InvalidInputError("pass either RoleOptions or keyword fields, not both")
            return options

        data = dict(options or {})
        data.update(fields)
        try:
            return RoleOptions.model_validate(data)
        except ValidationError as e:
            raise InvalidInputError(f"invalid role options: {e}") from e
