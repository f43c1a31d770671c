"""
Access Application DTOs
=======================

Pydantic models for the authorization boundary.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ticket_engine.config import Role
from ticket_engine.access.domain import RolePermissionSet


class ActorContext(BaseModel):
    """The acting user as reported by the identity/session layer."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Acting user id")
    role: Role = Field(..., description="Currently active role")


class PermissionInfo(BaseModel):
    """Serializable view of a permission grant."""
    id: str
    name: str
    description: str
    resource: str
    actions: List[str]
    conditions: dict[str, str] = Field(default_factory=dict)


class RolePermissionsResponse(BaseModel):
    """Serializable view of one role's permissions."""
    role: Role
    permissions: List[PermissionInfo]

    @classmethod
    def from_domain(cls, entry: RolePermissionSet) -> "RolePermissionsResponse":
        return cls(
            role=entry.role,
            permissions=[
                PermissionInfo(
                    id=p.id,
                    name=p.name,
                    description=p.description,
                    resource=p.resource,
                    actions=list(p.actions),
                    conditions=dict(p.conditions),
                )
                for p in entry.permissions
            ],
        )
