"""
Access Application Services
============================

Authorization for callers: combines the permission resolver with the
record-level access gate, records denials and raises for the
``require_*`` variants.
"""

from typing import List, Mapping, Optional

from ticket_engine.config import Action, Resource
from ticket_engine.core.exceptions import AccessDeniedException
from ticket_engine.shared.infrastructure.logging import get_context_logger
from ticket_engine.access.application.dto import ActorContext, RolePermissionsResponse
from ticket_engine.access.domain import (
    AccessGate,
    DEFAULT_RESOLVER,
    PermissionResolver,
    SELF,
    TicketAccessRecord,
    UserAccessRecord,
)


def ticket_context(actor_id: str, ticket: TicketAccessRecord) -> dict[str, str]:
    """Condition facts about a ticket, relative to the actor."""
    context = {}
    if ticket.requester_id == actor_id:
        context["requester"] = SELF
    if ticket.assigned_to_id is not None and ticket.assigned_to_id == actor_id:
        context["assignedTo"] = SELF
    return context


def user_context(actor_id: str, target: UserAccessRecord) -> dict[str, str]:
    """Condition facts about a target user, relative to the actor."""
    context = {"role": target.role.value}
    if target.id == actor_id:
        context["id"] = SELF
    return context


class AuthorizationService:
    """
    Authorization checks for the request layer.

    Record checks require both the role permission and the access gate
    to allow the action.
    """

    def __init__(
        self,
        resolver: PermissionResolver = DEFAULT_RESOLVER,
        correlation_id: Optional[str] = None
    ):
        self._resolver = resolver
        self._logger = get_context_logger(__name__, correlation_id)

    def _deny(self, actor: ActorContext, resource: str, action: str, **extra) -> None:
        self._logger.warning(
            "Permission denied",
            extra={
                "actor_id": actor.id,
                "role": actor.role.value,
                "resource": resource,
                "action": action,
                **extra,
            }
        )

    def can(
        self,
        actor: ActorContext,
        resource: str,
        action: str,
        context: Optional[Mapping[str, str]] = None
    ) -> bool:
        """Role-level permission check."""
        allowed = self._resolver.has_permission(actor.role, resource, action, context)
        if not allowed:
            self._deny(actor, resource, action)
        return allowed

    def can_access_ticket(
        self,
        actor: ActorContext,
        ticket: TicketAccessRecord,
        action: str = Action.READ
    ) -> bool:
        """Role permission on tickets plus ownership/assignment rules."""
        context = ticket_context(actor.id, ticket)
        allowed = (
            self._resolver.has_permission(actor.role, Resource.TICKETS, action, context)
            and AccessGate.can_access_ticket(actor.role, actor.id, ticket, action)
        )
        if not allowed:
            self._deny(
                actor, Resource.TICKETS, action,
                ticket_id=getattr(ticket, "id", None)
            )
        return allowed

    def can_access_user(
        self,
        actor: ActorContext,
        target: UserAccessRecord,
        action: str = Action.READ
    ) -> bool:
        """Role permission on users plus the target-user rules."""
        context = user_context(actor.id, target)
        allowed = (
            self._resolver.has_permission(actor.role, Resource.USERS, action, context)
            and AccessGate.can_access_user(actor.role, actor.id, target, action)
        )
        if not allowed:
            self._deny(actor, Resource.USERS, action, target_id=target.id)
        return allowed

    def require(
        self,
        actor: ActorContext,
        resource: str,
        action: str,
        context: Optional[Mapping[str, str]] = None
    ) -> None:
        """
        Raises:
            AccessDeniedException: if the role lacks the permission
        """
        if not self.can(actor, resource, action, context):
            raise AccessDeniedException(actor.id, resource, action)

    def require_ticket_access(
        self,
        actor: ActorContext,
        ticket: TicketAccessRecord,
        action: str = Action.READ
    ) -> None:
        if not self.can_access_ticket(actor, ticket, action):
            raise AccessDeniedException(actor.id, Resource.TICKETS, action)

    def require_user_access(
        self,
        actor: ActorContext,
        target: UserAccessRecord,
        action: str = Action.READ
    ) -> None:
        if not self.can_access_user(actor, target, action):
            raise AccessDeniedException(actor.id, Resource.USERS, action)

    def list_role_permissions(self) -> List[RolePermissionsResponse]:
        """All roles with their permissions, for admin screens."""
        return [
            RolePermissionsResponse.from_domain(entry)
            for entry in self._resolver.catalog.all_role_permissions()
        ]
