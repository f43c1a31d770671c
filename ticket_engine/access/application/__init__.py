"""
Access Application Layer
=========================

Application layer for authorization.

Contains:
- Services: AuthorizationService
- DTOs: ActorContext and catalog views
"""

from ticket_engine.access.application.dto import (
    ActorContext,
    PermissionInfo,
    RolePermissionsResponse,
)
from ticket_engine.access.application.services import (
    AuthorizationService,
    ticket_context,
    user_context,
)

__all__ = [
    # DTOs
    "ActorContext",
    "PermissionInfo",
    "RolePermissionsResponse",
    # Services
    "AuthorizationService",
    "ticket_context",
    "user_context",
]
