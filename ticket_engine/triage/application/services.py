"""
Triage Application Services
============================

Application service for ticket auto-assignment.

Reads the live roster from its provider, delegates the choice to the
domain balancer and records the outcome.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ticket_engine.config import settings
from ticket_engine.shared.infrastructure.logging import get_logger
from ticket_engine.sla.domain import Ticket
from ticket_engine.triage.application.dto import AssignmentRequest, AssignmentResponse
from ticket_engine.triage.domain import AssignmentBalancer, StaffCandidate

logger = get_logger(__name__)


# ========== Collaborator Interfaces ==========

class IStaffRosterProvider(ABC):
    """Interface for the live staff roster."""

    @abstractmethod
    def get_candidates(self) -> List[StaffCandidate]:
        """Active staff with their roles and current workload, in stable order."""


# ========== Application Services ==========

class AssignmentService:
    """
    Service for least-loaded ticket assignment.

    Two tickets created at the same moment may land on the same person;
    balancing is best effort.
    """

    def __init__(
        self,
        roster_provider: IStaffRosterProvider,
        enabled: Optional[bool] = None
    ):
        self._roster_provider = roster_provider
        self._enabled = settings.auto_assign_enabled if enabled is None else enabled

    @property
    def enabled(self) -> bool:
        return self._enabled

    def assign(self, request: AssignmentRequest) -> AssignmentResponse:
        """
        Pick an assignee for a ticket.

        Returns:
            AssignmentResponse; ``needs_manual_triage`` is set when auto
            assignment is disabled or the roster is empty
        """
        if not self._enabled:
            logger.info(
                "Auto-assignment disabled",
                extra={"ticket_id": request.ticket_id}
            )
            return AssignmentResponse(
                ticket_id=request.ticket_id,
                needs_manual_triage=True,
            )

        candidates = self._roster_provider.get_candidates()
        assignee_id = AssignmentBalancer.auto_assign(
            request.priority, request.sla_level, candidates
        )

        if assignee_id is None:
            logger.warning(
                "No staff available for auto-assignment",
                extra={
                    "ticket_id": request.ticket_id,
                    "priority": request.priority.value,
                    "sla_level": request.sla_level.value,
                }
            )
        else:
            logger.info(
                "Ticket auto-assigned",
                extra={
                    "ticket_id": request.ticket_id,
                    "assignee_id": assignee_id,
                    "priority": request.priority.value,
                    "sla_level": request.sla_level.value,
                    "candidates": len(candidates),
                }
            )

        return AssignmentResponse(
            ticket_id=request.ticket_id,
            assignee_id=assignee_id,
            needs_manual_triage=assignee_id is None,
            candidates_considered=len(candidates),
        )

    def assign_ticket(self, ticket: Ticket) -> AssignmentResponse:
        """Assign a ticket entity in place. Existing assignees are kept."""
        if ticket.assigned_to_id is not None:
            return AssignmentResponse(
                ticket_id=ticket.id,
                assignee_id=ticket.assigned_to_id,
                needs_manual_triage=False,
            )

        response = self.assign(AssignmentRequest(
            ticket_id=ticket.id,
            priority=ticket.priority,
            sla_level=ticket.sla_level,
        ))
        if response.assignee_id is not None:
            ticket.assign_to(response.assignee_id)
        return response
