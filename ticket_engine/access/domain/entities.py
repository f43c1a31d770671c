"""
Access Domain Entities
======================

Permission grants and the record shapes the access gate inspects.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Protocol, Tuple

from ticket_engine.config import Role

WILDCARD = "*"
SELF = "self"


@dataclass(frozen=True)
class Permission:
    """
    A (resource, action, conditions) grant attached to a role.

    ``action`` is a comma-separated list or ``"*"``. Every condition must
    be present in the request context with exactly the same value.
    """
    id: str
    name: str
    description: str
    resource: str
    action: str
    conditions: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    def __post_init__(self):
        if not isinstance(self.conditions, MappingProxyType):
            object.__setattr__(self, "conditions", MappingProxyType(dict(self.conditions)))

    @property
    def actions(self) -> Tuple[str, ...]:
        return tuple(a.strip() for a in self.action.split(","))

    def covers_resource(self, resource: str) -> bool:
        return self.resource == WILDCARD or self.resource == resource

    def covers_action(self, action: str) -> bool:
        actions = self.actions
        return WILDCARD in actions or action in actions

    def conditions_met(self, context: Optional[Mapping[str, str]]) -> bool:
        """A missing context key fails its condition."""
        if not self.conditions:
            return True
        if context is None:
            return False
        return all(
            key in context and context[key] == expected
            for key, expected in self.conditions.items()
        )

    def matches(
        self,
        resource: str,
        action: str,
        context: Optional[Mapping[str, str]] = None
    ) -> bool:
        return (
            self.covers_resource(resource)
            and self.covers_action(action)
            and self.conditions_met(context)
        )


@dataclass(frozen=True)
class RolePermissionSet:
    """Ordered permissions for one role."""
    role: Role
    permissions: Tuple[Permission, ...]


class TicketAccessRecord(Protocol):
    """Ticket fields the access gate reads."""
    requester_id: str
    assigned_to_id: Optional[str]


class UserAccessRecord(Protocol):
    """Target-user fields the access gate reads."""
    id: str
    role: Role


@dataclass(frozen=True)
class TicketRecord:
    """Plain ticket record supplied by the ticket store."""
    id: str
    requester_id: str
    assigned_to_id: Optional[str] = None


@dataclass(frozen=True)
class UserRecord:
    """Plain user record supplied by the identity layer."""
    id: str
    role: Role

