"""
Access Gate
===========

Ownership- and assignment-aware checks for individual ticket and user
records. Layered on top of the permission resolver, not a replacement.

Precedence: ADMIN > SUPPORT_MANAGER > SUPPORT_STAFF > END_USER.
"""

from ticket_engine.config import Action, Role
from ticket_engine.access.domain.entities import TicketAccessRecord, UserAccessRecord


class AccessGate:
    """Record-level access rules. Unknown roles are denied."""

    @staticmethod
    def can_access_ticket(
        role: Role,
        actor_id: str,
        ticket: TicketAccessRecord,
        action: str = Action.READ
    ) -> bool:
        """
        Staff may read any ticket and act on tickets assigned to them;
        end users only on tickets they requested.
        """
        match role:
            case Role.ADMIN | Role.SUPPORT_MANAGER:
                return True
            case Role.SUPPORT_STAFF:
                if action == Action.READ:
                    return True
                return ticket.assigned_to_id is not None and ticket.assigned_to_id == actor_id
            case Role.END_USER:
                return ticket.requester_id == actor_id
            case _:
                return False

    @staticmethod
    def can_access_user(
        role: Role,
        actor_id: str,
        target: UserAccessRecord,
        action: str = Action.READ
    ) -> bool:
        """
        Managers reach support staff, staff may read anyone, end users
        only themselves.
        """
        match role:
            case Role.ADMIN:
                return True
            case Role.SUPPORT_MANAGER:
                return target.role == Role.SUPPORT_STAFF
            case Role.SUPPORT_STAFF:
                return action == Action.READ
            case Role.END_USER:
                return actor_id == target.id
            case _:
                return False
