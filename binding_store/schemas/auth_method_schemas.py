"""
Pydantic schemas for per-service authentication methods.

Each kind of authentication method is a variant keyed by its ``type`` field.
Stores keep the typed variants and only hand out plain dictionaries at the
query boundary, so adding a variant does not change what callers receive.
"""

from typing import Annotated, Any, Dict, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..constants import AuthMethodType
from ..exceptions import ErrorCode, ValidationError


class BaseAuthMethod(BaseModel):
    """Fields shared by every authentication method variant."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    type: str = Field(..., description="Authentication method kind")
    service: str = Field(..., min_length=1, description="Service the method belongs to")
    host: str = Field(..., min_length=1, description="Host the method applies to")
    path: str = Field(default="", description="Path on the credential endpoint")
    port: int = Field(..., gt=0, le=65535, description="Port of the credential endpoint")

    def matches(self, service: str, host: str, auth_type: str) -> bool:
        """Exact match on service, host and type."""
        return self.service == service and self.host == host and self.type == auth_type

    def to_mapping(self) -> Dict[str, Any]:
        """Plain field-name to value mapping returned to callers."""
        return self.model_dump()


class ApiKeyAuth(BaseAuthMethod):
    """Authentication with an API key held by the credential endpoint."""

    type: Literal["api-key"] = AuthMethodType.API_KEY.value
    access_key: str = Field(..., min_length=1, description="Identifier of the API key")


class HeadersAuth(BaseAuthMethod):
    """Authentication by forwarding a fixed set of request headers."""

    type: Literal["headers"] = AuthMethodType.HEADERS.value
    headers: Dict[str, str] = Field(default_factory=dict, description="Headers to send")


AuthMethod = Annotated[Union[ApiKeyAuth, HeadersAuth], Field(discriminator="type")]

_auth_method_adapter: TypeAdapter = TypeAdapter(AuthMethod)


def parse_auth_method(data: Dict[str, Any]) -> BaseAuthMethod:
    """
    Build the typed variant for a raw auth method mapping.

    Args:
        data: Mapping with a ``type`` key naming the variant

    Returns:
        The matching variant instance

    Raises:
        ValidationError: If the type is unknown or the fields do not validate
    """
    try:
        return _auth_method_adapter.validate_python(data)  # type: ignore[no-any-return]
    except PydanticValidationError as e:
        raise ValidationError(
            f"Invalid auth method record: {e.error_count()} validation error(s)",
            field="type",
            error_code=ErrorCode.INVALID_FORMAT,
            cause=e,
            auth_type=data.get("type") if isinstance(data, dict) else None,
        )
