"""
Ticket Engine - Composition Root
================================

Wires the SLA, triage and access services together for a host
application.

STARTUP:
1. Setup structured logging
2. Load the SLA policy (once)
3. Build the SLA, assignment and authorization services

Ticket creation flow:
    impact, urgency -> priority -> SLA level -> due date -> assignee
"""

from dataclasses import dataclass
from typing import Optional

from ticket_engine.config import Action, Resource, Settings, settings as default_settings
from ticket_engine.shared.infrastructure.logging import setup_logging, get_logger
from ticket_engine.sla.application import (
    ClassifyTicketRequest,
    SLAService,
)
from ticket_engine.sla.domain import Ticket
from ticket_engine.sla.infrastructure import SLAPolicyLoader
from ticket_engine.triage.application import (
    AssignmentResponse,
    AssignmentService,
    IStaffRosterProvider,
)
from ticket_engine.access.application import ActorContext, AuthorizationService
from ticket_engine.access.domain import SELF

logger = get_logger(__name__)


@dataclass(frozen=True)
class CreatedTicket:
    """A newly opened ticket and its assignment outcome."""
    ticket: Ticket
    assignment: AssignmentResponse


class TicketEngine:
    """Facade over the engine's application services."""

    def __init__(
        self,
        sla_service: SLAService,
        assignment_service: AssignmentService,
        authorization_service: AuthorizationService,
    ):
        self.sla = sla_service
        self.assignment = assignment_service
        self.authorization = authorization_service

    def create_ticket(
        self,
        actor: ActorContext,
        ticket_id: str,
        request: ClassifyTicketRequest,
    ) -> CreatedTicket:
        """
        Open a ticket for ``actor`` and run auto-assignment.

        Raises:
            AccessDeniedException: if the actor may not create tickets
        """
        self.authorization.require(
            actor, Resource.TICKETS, Action.CREATE, {"requester": SELF}
        )
        ticket = self.sla.open_ticket(ticket_id, actor.id, request)
        assignment = self.assignment.assign_ticket(ticket)
        return CreatedTicket(ticket=ticket, assignment=assignment)


def create_engine(
    roster_provider: IStaffRosterProvider,
    app_settings: Optional[Settings] = None,
    configure_logging: bool = True,
) -> TicketEngine:
    """
    Build a TicketEngine from settings.

    Args:
        roster_provider: Live staff roster collaborator
        app_settings: Settings to use (defaults to the global settings)
        configure_logging: Install the JSON log handler on the root logger
    """
    app_settings = app_settings or default_settings

    if configure_logging:
        setup_logging(app_settings.log_level, app_settings.environment)

    policy_loader = SLAPolicyLoader(app_settings.sla_policy_path)
    policy_loader.load()

    logger.info("Ticket engine started", extra={
        "version": app_settings.app_version,
        "environment": app_settings.environment,
        "auto_assign": app_settings.auto_assign_enabled,
    })

    return TicketEngine(
        sla_service=SLAService(policy_loader),
        assignment_service=AssignmentService(
            roster_provider, enabled=app_settings.auto_assign_enabled
        ),
        authorization_service=AuthorizationService(),
    )
