"""
Pydantic schema for bindings.

A binding authorizes an identity (DN or OIDC token) to use a service on a
host. Two bindings are equal when every field is equal, which is what
update_binding matches on.
"""

from pydantic import BaseModel, ConfigDict, Field


class Binding(BaseModel):
    """An identity's authorization to use a service at a host."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    name: str = Field(..., description="Binding name, not required to be unique")
    service: str = Field(..., description="Name of the bound service")
    host: str = Field(..., description="Host of the bound service")
    dn: str = Field(default="", description="Distinguished name of the identity")
    oidc_token: str = Field(default="", description="Alternate identity token")
    unique_key: str = Field(default="", description="Key issued to the bound identity")
    created_on: str = Field(default="", description="Creation time, ISO-8601")
    last_auth: str = Field(default="", description="Last authentication time, empty if never")
