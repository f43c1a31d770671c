"""
Triage Domain Entities
======================

Domain objects for ticket triage: the staff roster seen by the
assignment balancer.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable

from ticket_engine.config import Role, MANAGER_ROLES


@dataclass(frozen=True)
class StaffCandidate:
    """
    A staff member who could take a ticket.

    Workload is the count of open tickets at the time the roster was read.
    """
    id: str
    roles: FrozenSet[Role] = field(default_factory=frozenset)
    current_workload: int = 0

    def __post_init__(self):
        """Validate candidate on initialization."""
        if not self.id:
            raise ValueError("Candidate id is required")
        if self.current_workload < 0:
            raise ValueError("Workload cannot be negative")
        if not isinstance(self.roles, frozenset):
            object.__setattr__(self, "roles", frozenset(self.roles))

    @classmethod
    def of(cls, id: str, roles: Iterable[Role], current_workload: int = 0) -> "StaffCandidate":
        return cls(id=id, roles=frozenset(roles), current_workload=current_workload)

    def has_any_role(self, roles: Iterable[Role]) -> bool:
        return not self.roles.isdisjoint(roles)

    @property
    def is_manager(self) -> bool:
        """Support manager or admin."""
        return self.has_any_role(MANAGER_ROLES)
