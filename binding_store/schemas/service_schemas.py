"""
Pydantic schema for services.

A service is a protected system reachable on one or more hosts.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Service(BaseModel):
    """A system that requires authentication."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    name: str = Field(..., min_length=1, description="Unique service name")
    hosts: List[str] = Field(..., min_length=1, description="Hostnames serving this service")
    auth_types: List[str] = Field(
        default_factory=list, description="Authentication types the service accepts"
    )
    auth_method: str = Field(default="", description="Configured authentication method")
    retrieval_field: str = Field(
        default="", description="Field the client-presented token is read from"
    )
