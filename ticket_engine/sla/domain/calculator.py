"""
SLA Calculator
==============

Pure functions for priority, SLA tier, due date and SLA status.

Stateless utility class: all SLA calculation logic in one place. Nothing
here reads the clock; "now" is always passed in by the caller.
"""

import math
from datetime import datetime, timedelta
from typing import Iterable, Optional, Protocol

from ticket_engine.config import (
    Impact, Urgency, Priority, SlaLevel, SlaStatusColor, TicketStatus,
    CLOSED_STATUSES,
)
from ticket_engine.sla.domain.value_objects import (
    DEFAULT_SLA_POLICY,
    SLAPolicy,
    SLAStatus,
    TicketClassification,
)

ONE_HOUR = timedelta(hours=1)

PRIORITY_MATRIX: dict[Impact, dict[Urgency, Priority]] = {
    Impact.MINOR: {
        Urgency.LOW: Priority.LOW,
        Urgency.NORMAL: Priority.LOW,
        Urgency.HIGH: Priority.MEDIUM,
        Urgency.IMMEDIATE: Priority.MEDIUM,
    },
    Impact.MODERATE: {
        Urgency.LOW: Priority.LOW,
        Urgency.NORMAL: Priority.MEDIUM,
        Urgency.HIGH: Priority.HIGH,
        Urgency.IMMEDIATE: Priority.HIGH,
    },
    Impact.MAJOR: {
        Urgency.LOW: Priority.MEDIUM,
        Urgency.NORMAL: Priority.HIGH,
        Urgency.HIGH: Priority.HIGH,
        Urgency.IMMEDIATE: Priority.CRITICAL,
    },
    Impact.CRITICAL: {
        Urgency.LOW: Priority.HIGH,
        Urgency.NORMAL: Priority.HIGH,
        Urgency.HIGH: Priority.CRITICAL,
        Urgency.IMMEDIATE: Priority.CRITICAL,
    },
}


class ClosableTicket(Protocol):
    """Shape needed for compliance reporting."""
    status: TicketStatus
    due_date: Optional[datetime]
    closed_at: Optional[datetime]


class SLACalculator:
    """
    Pure functions for SLA calculations.

    Every method is total over valid enum inputs and never raises.
    """

    @staticmethod
    def resolve_priority(impact: Impact, urgency: Urgency) -> Priority:
        """Look up priority in the impact x urgency matrix."""
        return PRIORITY_MATRIX[impact][urgency]

    @staticmethod
    def classify_sla(priority: Priority, impact: Impact) -> SlaLevel:
        """
        Derive the SLA tier.

        Critical priority or critical impact gets critical support, high
        priority or major impact gets premium, everything else standard.
        """
        if priority == Priority.CRITICAL or impact == Impact.CRITICAL:
            return SlaLevel.CRITICAL_SUPPORT
        if priority == Priority.HIGH or impact == Impact.MAJOR:
            return SlaLevel.PREMIUM
        return SlaLevel.STANDARD

    @staticmethod
    def add_business_hours(
        start: datetime,
        hours: int,
        policy: SLAPolicy = DEFAULT_SLA_POLICY
    ) -> datetime:
        """
        Step forward one hour at a time from ``start`` until ``hours``
        business hours have been counted.

        An hour counts when the timestamp reached after stepping falls on a
        business day inside the business window. Minutes, seconds and tzinfo
        of ``start`` are carried through unchanged.
        """
        current = start
        counted = 0
        while counted < hours:
            current += ONE_HOUR
            if policy.business_hours.counts(current):
                counted += 1
        return current

    @staticmethod
    def compute_due_date(
        sla_level: SlaLevel,
        created_at: datetime,
        policy: SLAPolicy = DEFAULT_SLA_POLICY
    ) -> datetime:
        """
        Calculate the resolution due date for a ticket.

        Example:
            Monday 09:00, STANDARD (40 business hours) -> next Monday 09:00
        """
        return SLACalculator.add_business_hours(
            created_at, policy.resolution_budget(sla_level), policy
        )

    @staticmethod
    def response_budget_hours(
        sla_level: SlaLevel,
        policy: SLAPolicy = DEFAULT_SLA_POLICY
    ) -> int:
        """Business hours allowed before the first response."""
        return policy.response_budget(sla_level)

    @staticmethod
    def compute_response_deadline(
        sla_level: SlaLevel,
        created_at: datetime,
        policy: SLAPolicy = DEFAULT_SLA_POLICY
    ) -> datetime:
        """First-response deadline, same business-hour arithmetic as due dates."""
        return SLACalculator.add_business_hours(
            created_at, policy.response_budget(sla_level), policy
        )

    @staticmethod
    def classify_ticket(
        impact: Impact,
        urgency: Urgency,
        created_at: datetime,
        policy: SLAPolicy = DEFAULT_SLA_POLICY
    ) -> TicketClassification:
        """Derive priority, SLA level and due date in one step."""
        priority = SLACalculator.resolve_priority(impact, urgency)
        sla_level = SLACalculator.classify_sla(priority, impact)
        due_date = SLACalculator.compute_due_date(sla_level, created_at, policy)
        return TicketClassification(
            priority=priority,
            sla_level=sla_level,
            due_date=due_date,
        )

    @staticmethod
    def evaluate_status(
        due_date: datetime,
        sla_level: SlaLevel,
        now: datetime,
        policy: SLAPolicy = DEFAULT_SLA_POLICY
    ) -> SLAStatus:
        """
        Evaluate how close a due date is to breach.

        Args:
            due_date: The resolution due date
            sla_level: SLA tier selecting the warning/critical thresholds
            now: Evaluation time, supplied by the caller
            policy: SLA policy to read thresholds from

        Returns:
            SLAStatus with remaining hours rounded up and floored at zero
        """
        hours_remaining = math.ceil((due_date - now).total_seconds() / 3600)
        thresholds = policy.thresholds_for(sla_level)

        is_breached = hours_remaining <= 0
        is_approaching = hours_remaining <= thresholds.warning
        is_critical = hours_remaining <= thresholds.critical

        if is_breached or is_critical:
            status = SlaStatusColor.RED
        elif is_approaching:
            status = SlaStatusColor.YELLOW
        else:
            status = SlaStatusColor.GREEN

        return SLAStatus(
            is_breached=is_breached,
            is_approaching_breach=is_approaching,
            time_remaining_hours=max(0, hours_remaining),
            status=status,
        )

    @staticmethod
    def is_overdue(
        due_date: Optional[datetime],
        status: TicketStatus,
        now: datetime
    ) -> bool:
        """Open ticket past its due date. Resolved/closed tickets never are."""
        if due_date is None or status in CLOSED_STATUSES:
            return False
        return now > due_date

    @staticmethod
    def compliance_rate(tickets: Iterable[ClosableTicket]) -> int:
        """
        Percentage of finished tickets closed on or before their due date.

        Only resolved/closed tickets with both a due date and a close time
        are considered. Returns 100 when there are none.
        """
        finished = [
            t for t in tickets
            if t.status in CLOSED_STATUSES and t.due_date and t.closed_at
        ]
        if not finished:
            return 100

        compliant = sum(1 for t in finished if t.closed_at <= t.due_date)
        # half-up, not banker's rounding
        return math.floor(compliant * 100 / len(finished) + 0.5)
