"""
SLA Domain Entities
====================

Pure Python domain entities for SLA tracking.

Following Domain-Driven Design principles, these entities contain
business logic and are free of infrastructure concerns.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ticket_engine.config import (
    Impact, Urgency, Priority, SlaLevel, TicketStatus, CLOSED_STATUSES
)
from ticket_engine.sla.domain.calculator import SLACalculator
from ticket_engine.sla.domain.value_objects import (
    DEFAULT_SLA_POLICY, SLAPolicy, SLAStatus
)

DERIVATION_INPUTS = frozenset({"impact", "urgency", "created_at", "policy"})


@dataclass
class Ticket:
    """
    Ticket entity carrying the fields the SLA engine reads and derives.

    priority, sla_level and due_date are cached derivations of impact,
    urgency, created_at and policy. They are exposed read-only; writing
    any of those inputs recomputes all three together.
    """

    id: str
    requester_id: str
    impact: Impact
    urgency: Urgency
    created_at: datetime
    status: TicketStatus = TicketStatus.NEW
    assigned_to_id: Optional[str] = None
    closed_at: Optional[datetime] = None

    _priority: Priority = field(init=False, repr=False)
    _sla_level: SlaLevel = field(init=False, repr=False)
    _due_date: datetime = field(init=False, repr=False)
    policy: SLAPolicy = field(default=DEFAULT_SLA_POLICY, repr=False, compare=False)

    def __setattr__(self, name, value):
        super().__setattr__(name, value)
        if name in DERIVATION_INPUTS and "_due_date" in self.__dict__:
            self._derive()

    def __post_init__(self):
        """Derive priority, SLA level and due date on creation."""
        if self.closed_at and self.closed_at < self.created_at:
            raise ValueError("closed_at cannot be before created_at")
        self._derive()

    @classmethod
    def open(
        cls,
        id: str,
        requester_id: str,
        impact: Impact,
        urgency: Urgency,
        created_at: datetime,
        policy: SLAPolicy = DEFAULT_SLA_POLICY,
    ) -> "Ticket":
        """Create a new ticket with its SLA fields derived."""
        return cls(
            id=id,
            requester_id=requester_id,
            impact=impact,
            urgency=urgency,
            created_at=created_at,
            policy=policy,
        )

    def _derive(self) -> None:
        classification = SLACalculator.classify_ticket(
            self.impact, self.urgency, self.created_at, self.policy
        )
        self._priority = classification.priority
        self._sla_level = classification.sla_level
        self._due_date = classification.due_date

    @property
    def priority(self) -> Priority:
        return self._priority

    @property
    def sla_level(self) -> SlaLevel:
        return self._sla_level

    @property
    def due_date(self) -> datetime:
        return self._due_date

    @property
    def is_open(self) -> bool:
        """Check if ticket is still open."""
        return self.status not in CLOSED_STATUSES

    def reclassify(
        self,
        impact: Optional[Impact] = None,
        urgency: Optional[Urgency] = None
    ) -> bool:
        """
        Apply an impact and/or urgency edit.

        Returns:
            True when the derived fields were recomputed
        """
        new_impact = impact if impact is not None else self.impact
        new_urgency = urgency if urgency is not None else self.urgency
        if new_impact == self.impact and new_urgency == self.urgency:
            return False

        object.__setattr__(self, "impact", new_impact)
        object.__setattr__(self, "urgency", new_urgency)
        self._derive()
        return True

    def assign_to(self, staff_id: Optional[str]) -> None:
        self.assigned_to_id = staff_id

    def sla_status(self, now: datetime) -> SLAStatus:
        """Evaluate this ticket's due date against ``now``."""
        return SLACalculator.evaluate_status(
            self._due_date, self._sla_level, now, self.policy
        )

    def is_overdue(self, now: datetime) -> bool:
        return SLACalculator.is_overdue(self._due_date, self.status, now)

    @property
    def response_deadline(self) -> datetime:
        """First-response deadline for this ticket."""
        return SLACalculator.compute_response_deadline(
            self._sla_level, self.created_at, self.policy
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "id": self.id,
            "requester_id": self.requester_id,
            "impact": self.impact.value,
            "urgency": self.urgency.value,
            "priority": self._priority.value,
            "sla_level": self._sla_level.value,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
            "due_date": self._due_date.isoformat(),
            "closed_at": self.closed_at.isoformat() if self.closed_at else None,
            "assigned_to_id": self.assigned_to_id,
        }
