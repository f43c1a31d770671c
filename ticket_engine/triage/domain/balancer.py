"""
Assignment Balancer
===================

Picks an assignee for a ticket from a roster supplied by the caller.

Rules:
1. An empty roster yields no assignee.
2. The SLA level narrows the roster to eligible roles.
3. If nobody is eligible, the whole roster is used instead.
4. Candidates are ranked by workload, ties broken by roster position.
5. Critical-priority tickets go to the least loaded manager when one
   is among the ranked candidates.
"""

from typing import FrozenSet, List, Optional, Sequence

from ticket_engine.config import Priority, Role, SlaLevel, MANAGER_ROLES
from ticket_engine.triage.domain.entities import StaffCandidate

PREMIUM_ROLES: FrozenSet[Role] = frozenset(
    {Role.SUPPORT_MANAGER, Role.ADMIN, Role.SUPPORT_STAFF}
)


class AssignmentBalancer:
    """Stateless least-loaded assignment."""

    @staticmethod
    def eligible_roles(sla_level: SlaLevel) -> Optional[FrozenSet[Role]]:
        """Roles allowed to work a tier. ``None`` means anyone."""
        match sla_level:
            case SlaLevel.CRITICAL_SUPPORT:
                return MANAGER_ROLES
            case SlaLevel.PREMIUM:
                return PREMIUM_ROLES
            case SlaLevel.STANDARD:
                return None

    @staticmethod
    def eligible_candidates(
        sla_level: SlaLevel,
        candidates: Sequence[StaffCandidate]
    ) -> List[StaffCandidate]:
        """
        Filter the roster by SLA level, falling back to the full roster
        when the filter leaves nobody.
        """
        roles = AssignmentBalancer.eligible_roles(sla_level)
        if roles is None:
            return list(candidates)

        eligible = [c for c in candidates if c.has_any_role(roles)]
        return eligible or list(candidates)

    @staticmethod
    def rank(candidates: Sequence[StaffCandidate]) -> List[StaffCandidate]:
        """Ascending workload; equal workloads keep roster order."""
        indexed = sorted(
            enumerate(candidates),
            key=lambda pair: (pair[1].current_workload, pair[0])
        )
        return [candidate for _, candidate in indexed]

    @staticmethod
    def auto_assign(
        priority: Priority,
        sla_level: SlaLevel,
        candidates: Sequence[StaffCandidate]
    ) -> Optional[str]:
        """
        Choose the assignee id for a ticket.

        Args:
            priority: Ticket priority
            sla_level: Ticket SLA level
            candidates: Roster in provider order

        Returns:
            The chosen candidate's id, or None for an empty roster
        """
        if not candidates:
            return None

        ranked = AssignmentBalancer.rank(
            AssignmentBalancer.eligible_candidates(sla_level, candidates)
        )

        if priority == Priority.CRITICAL:
            for candidate in ranked:
                if candidate.is_manager:
                    return candidate.id

        return ranked[0].id
