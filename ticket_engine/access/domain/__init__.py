"""
Access Domain Layer
===================

Domain layer for role-based authorization.

Contains:
- Entities: Permission, RolePermissionSet, ticket/user access records
- Static data: PermissionCatalog
- Domain Services: PermissionResolver, AccessGate

This layer has no dependencies on infrastructure - pure Python business logic.
"""

from ticket_engine.access.domain.entities import (
    Permission,
    RolePermissionSet,
    TicketAccessRecord,
    UserAccessRecord,
    TicketRecord,
    UserRecord,
    WILDCARD,
    SELF,
)
from ticket_engine.access.domain.catalog import PermissionCatalog, DEFAULT_CATALOG
from ticket_engine.access.domain.resolver import PermissionResolver, DEFAULT_RESOLVER
from ticket_engine.access.domain.gate import AccessGate

__all__ = [
    # Entities
    "Permission",
    "RolePermissionSet",
    "TicketAccessRecord",
    "UserAccessRecord",
    "TicketRecord",
    "UserRecord",
    "WILDCARD",
    "SELF",
    # Catalog
    "PermissionCatalog",
    "DEFAULT_CATALOG",
    # Services
    "PermissionResolver",
    "DEFAULT_RESOLVER",
    "AccessGate",
]
