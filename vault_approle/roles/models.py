"""
AppRole role models.

Pydantic models describing the configuration surface of an AppRole role and
how it maps onto Vault's request body.
"""

import ipaddress
import json
import re
from datetime import timedelta
from enum import Enum
from typing import Annotated, Any, Dict, Mapping, Optional, Set, Tuple, Union

from pydantic import (
    AfterValidator,
    AliasChoices,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    ValidationError,
    field_validator,
)
from pydantic_core import PydanticSerializationError

from ..errors import EncodingFailedError, InvalidInputError

# Characters that would change the meaning of the role's URL path segment
_UNSAFE_NAME_CHARS = re.compile(r"[/?#%\s\x00-\x1f\x7f]")

_GO_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)(ns|us|µs|ms|s|m|h)")
_UNIT_SECONDS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1,
    "m": 60,
    "h": 3600,
}


class TokenType(str, Enum):
    """Type of token a role issues."""

    SERVICE = "service"
    BATCH = "batch"
    DEFAULT = "default"
    DEFAULT_SERVICE = "default-service"
    DEFAULT_BATCH = "default-batch"


def validate_role_name(name: Any) -> str:
    """
    Check that a role name can be used verbatim as a URL path segment.

    Raises:
        InvalidInputError: If the name is empty or contains path-breaking characters
    """
    if not isinstance(name, str) or not name:
        raise InvalidInputError("role name must be a non-empty string")
    if name in (".", "..") or _UNSAFE_NAME_CHARS.search(name):
        raise InvalidInputError(f"role name {name!r} is not safe to use in a request path")
    return name


def parse_duration(value: Any) -> Any:
    """
    Accept Vault's duration spellings.

    Integer seconds ("3600", 3600) and Go-style strings ("60m", "1h30m") are
    turned into a timedelta. Anything else is left for pydantic to parse.
    """
    if isinstance(value, str):
        text = value.strip()
        try:
            if text.isdigit():
                return timedelta(seconds=int(text))
            parts = _GO_DURATION_PART.findall(text)
            if parts and "".join(number + unit for number, unit in parts) == text:
                return timedelta(seconds=sum(float(number) * _UNIT_SECONDS[unit] for number, unit in parts))
        except OverflowError as e:
            raise ValueError(f"duration {text!r} out of range") from e
    return value


def _non_negative(value: timedelta) -> timedelta:
    if value < timedelta(0):
        raise ValueError("duration must not be negative")
    return value


def duration_seconds(value: timedelta) -> int:
    """Serialize a duration as whole seconds."""
    if value.microseconds:
        raise ValueError(f"duration {value} is not a whole number of seconds")
    return int(value.total_seconds())


def _valid_cidr(value: str) -> str:
    try:
        ipaddress.ip_network(value, strict=False)
    except ValueError as e:
        raise ValueError(f"invalid CIDR block: {value!r}") from e
    return value


Duration = Annotated[
    timedelta,
    BeforeValidator(parse_duration),
    AfterValidator(_non_negative),
    PlainSerializer(duration_seconds, return_type=int),
]

Cidr = Annotated[str, AfterValidator(_valid_cidr)]


def _wire(name: str, wire_name: Optional[str] = None) -> Dict[str, Any]:
    """Field aliases: accept the Python or wire name, emit the wire name."""
    wire_name = wire_name or name
    return {
        "validation_alias": AliasChoices(name, wire_name),
        "serialization_alias": wire_name,
    }


class RoleOptions(BaseModel):
    """
    Desired configuration of one AppRole role.

    Every field except ``name`` defaults to its zero value and is left out of
    the request body at that value, so Vault applies its own defaults.
    ``require_secret_id`` is tri-state because Vault defaults
    ``bind_secret_id`` to true: None leaves it unset, False is sent.

    ``local_secret_ids`` can only be set when the role is first created;
    Vault rejects later changes.

    Durations accept a timedelta, integer seconds or a Go-style string such
    as "60m", and are always sent as integer seconds.

    Example:
        ```python
        options = RoleOptions(
            name="ci-runner",
            token_ttl=timedelta(hours=1),
            token_policies=["ci-read"],
            secret_id_bound_cidrs=["10.0.0.0/16"],
        )
        options.to_request_body()
        # {"role_name": "ci-runner", "token_ttl": 3600,
        #  "token_policies": ["ci-read"], "secret_id_bound_cidrs": ["10.0.0.0/16"]}
        ```
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "role_name": "ci-runner",
                "bind_secret_id": True,
                "secret_id_ttl": 600,
                "token_ttl": 3600,
                "token_max_ttl": 14400,
                "token_policies": ["ci-read"],
                "token_type": "service",
            }
        },
    )

    name: str = Field(..., **_wire("name", "role_name"))

    # Secret ID settings
    require_secret_id: Optional[bool] = Field(None, **_wire("require_secret_id", "bind_secret_id"))
    secret_id_bound_cidrs: Tuple[Cidr, ...] = Field((), **_wire("secret_id_bound_cidrs"))
    secret_id_max_uses: int = Field(0, ge=0, **_wire("secret_id_max_uses", "secret_id_num_uses"))
    secret_id_ttl: Duration = Field(timedelta(0), **_wire("secret_id_ttl"))
    local_secret_ids: bool = Field(False, **_wire("local_secret_ids", "enable_local_secret_ids"))

    # Token settings
    token_ttl: Duration = Field(timedelta(0), **_wire("token_ttl"))
    token_max_ttl: Duration = Field(timedelta(0), **_wire("token_max_ttl"))
    token_explicit_max_ttl: Duration = Field(timedelta(0), **_wire("token_explicit_max_ttl"))
    token_period: Duration = Field(timedelta(0), **_wire("token_period"))
    token_policies: Tuple[str, ...] = Field((), **_wire("token_policies"))
    token_bound_cidrs: Tuple[Cidr, ...] = Field((), **_wire("token_bound_cidrs"))
    token_no_default_policy: bool = Field(False, **_wire("token_no_default_policy"))
    token_num_uses: int = Field(0, ge=0, **_wire("token_num_uses"))
    token_type: Optional[TokenType] = Field(None, **_wire("token_type"))

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure the role name is usable as a path segment."""
        return validate_role_name(v)

    def to_request_body(self) -> Dict[str, Any]:
        """
        Build the request body for a create/update call.

        Returns:
            Mapping keyed by Vault's field names, holding only the fields that
            differ from their zero value plus ``role_name``

        Raises:
            EncodingFailedError: If a value cannot be represented (e.g. a
                duration with a sub-second remainder)
        """
        try:
            return self.model_dump(mode="json", by_alias=True, exclude=self._zero_fields())
        except PydanticSerializationError as e:
            raise EncodingFailedError(f"encoding role {self.name!r}: {e}") from e

    def _zero_fields(self) -> Set[str]:
        """Names of optional fields still at their zero value."""
        zero = set()
        for field_name, field_info in type(self).model_fields.items():
            if field_info.is_required():
                continue
            if getattr(self, field_name) == field_info.get_default(call_default_factory=True):
                zero.add(field_name)
        return zero

    def to_json(self) -> str:
        """Render the request body as a JSON string."""
        body = self.to_request_body()
        try:
            return json.dumps(body)
        except (TypeError, ValueError) as e:
            raise EncodingFailedError(f"encoding role {self.name!r}: {e}") from e

    @classmethod
    def from_request_body(cls, body: Union[str, bytes, Mapping[str, Any]]) -> "RoleOptions":
        """
        Rebuild RoleOptions from a request body.

        Accepts a JSON string or a mapping keyed by either Vault's field
        names or the Python field names.

        Raises:
            InvalidInputError: If the body is not valid JSON or fails validation
        """
        try:
            if isinstance(body, (str, bytes)):
                return cls.model_validate_json(body)
            return cls.model_validate(dict(body))
        except ValidationError as e:
            raise InvalidInputError(f"invalid role options: {e}") from e
