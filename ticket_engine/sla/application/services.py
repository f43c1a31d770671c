"""
SLA Application Services
=========================

Application services orchestrate business logic and coordinate between
domain objects and their collaborators.

Following SOLID principles:
- Single Responsibility: Each service has one clear purpose
- Dependency Inversion: Depend on abstractions (policy provider), not concrete implementations
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Iterable, Mapping

from ticket_engine.config import CLOSED_STATUSES
from ticket_engine.core.validation import parse_payload
from ticket_engine.shared.infrastructure.logging import get_logger
from ticket_engine.sla.application.dto import (
    ClassifyTicketRequest,
    ReclassifyTicketRequest,
    SLAStatusQuery,
    SLAStatusResponse,
    SLASummaryResponse,
    TicketClassificationResponse,
    TicketSnapshot,
)
from ticket_engine.sla.domain import SLACalculator, SLAPolicy, SLAStatus, Ticket

logger = get_logger(__name__)


# ========== Collaborator Interfaces (Dependency Inversion) ==========

class ISLAPolicyProvider(ABC):
    """Interface for SLA policy access."""

    @abstractmethod
    def get_policy(self) -> SLAPolicy:
        """Get the SLA policy in force."""


# ========== Application Services ==========

def _status_response(status: SLAStatus) -> SLAStatusResponse:
    return SLAStatusResponse(**status.to_dict())


class SLAService:
    """
    Service for ticket classification and SLA status.

    Callers pass "now" explicitly; the service never reads the clock.
    """

    def __init__(self, policy_provider: ISLAPolicyProvider):
        self._policy_provider = policy_provider

    @property
    def policy(self) -> SLAPolicy:
        return self._policy_provider.get_policy()

    def classify(self, request: ClassifyTicketRequest) -> TicketClassificationResponse:
        """
        Derive priority, SLA level, due date and response deadline.

        Args:
            request: Validated impact/urgency/created_at

        Returns:
            The derived fields to persist with the ticket
        """
        policy = self.policy
        classification = SLACalculator.classify_ticket(
            request.impact, request.urgency, request.created_at, policy
        )
        return TicketClassificationResponse(
            priority=classification.priority,
            sla_level=classification.sla_level,
            due_date=classification.due_date,
            response_deadline=SLACalculator.compute_response_deadline(
                classification.sla_level, request.created_at, policy
            ),
        )

    def classify_payload(self, payload: Mapping[str, Any]) -> TicketClassificationResponse:
        """Validate a raw payload then classify it."""
        return self.classify(parse_payload(ClassifyTicketRequest, payload))

    def open_ticket(
        self,
        ticket_id: str,
        requester_id: str,
        request: ClassifyTicketRequest
    ) -> Ticket:
        """Build a new ticket entity with its SLA fields derived."""
        ticket = Ticket.open(
            id=ticket_id,
            requester_id=requester_id,
            impact=request.impact,
            urgency=request.urgency,
            created_at=request.created_at,
            policy=self.policy,
        )
        logger.info(
            "Ticket classified",
            extra={
                "ticket_id": ticket.id,
                "priority": ticket.priority.value,
                "sla_level": ticket.sla_level.value,
                "due_date": ticket.due_date.isoformat(),
            }
        )
        return ticket

    def reclassify(self, ticket: Ticket, request: ReclassifyTicketRequest) -> bool:
        """Apply an impact/urgency edit, recomputing derived fields together."""
        previous = (ticket.priority, ticket.sla_level, ticket.due_date)
        changed = ticket.reclassify(impact=request.impact, urgency=request.urgency)
        if changed:
            logger.info(
                "Ticket reclassified",
                extra={
                    "ticket_id": ticket.id,
                    "previous_priority": previous[0].value,
                    "priority": ticket.priority.value,
                    "previous_sla_level": previous[1].value,
                    "sla_level": ticket.sla_level.value,
                    "previous_due_date": previous[2].isoformat(),
                    "due_date": ticket.due_date.isoformat(),
                }
            )
        return changed

    def evaluate(self, ticket: Ticket, now: datetime) -> SLAStatusResponse:
        """SLA status of a ticket entity at ``now``."""
        return _status_response(ticket.sla_status(now))

    def evaluate_query(self, query: SLAStatusQuery) -> SLAStatusResponse:
        """SLA status of a stored due date."""
        status = SLACalculator.evaluate_status(
            query.due_date, query.sla_level, query.now, self.policy
        )
        return _status_response(status)

    def summarize(
        self,
        tickets: Iterable[TicketSnapshot],
        now: datetime
    ) -> SLASummaryResponse:
        """
        Partition open tickets into breached, approaching and on-track.

        Tickets without a due date are on track. Compliance is computed
        over the resolved/closed tickets in the same batch.
        """
        policy = self.policy
        tickets = list(tickets)
        breached, approaching, on_track = [], [], []

        open_tickets = [t for t in tickets if t.status not in CLOSED_STATUSES]
        for ticket in open_tickets:
            if ticket.due_date is None:
                on_track.append(ticket.id)
                continue

            status = SLACalculator.evaluate_status(
                ticket.due_date, ticket.sla_level, now, policy
            )
            if status.is_breached:
                breached.append(ticket.id)
            elif status.is_approaching_breach:
                approaching.append(ticket.id)
            else:
                on_track.append(ticket.id)

        if breached:
            logger.warning(
                "Tickets past SLA due date",
                extra={"count": len(breached), "ticket_ids": breached}
            )

        return SLASummaryResponse(
            total_open=len(open_tickets),
            breached=breached,
            approaching=approaching,
            on_track=on_track,
            compliance_rate=SLACalculator.compliance_rate(tickets),
        )
