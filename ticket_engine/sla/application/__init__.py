"""
SLA Application Layer
=====================

Application layer for the SLA engine.

Contains:
- Services: Business logic orchestration
- DTOs: Data transfer objects for the boundary
- Interfaces: Collaborator abstractions
"""

from ticket_engine.sla.application.dto import (
    ClassifyTicketRequest,
    ReclassifyTicketRequest,
    SLAStatusQuery,
    TicketSnapshot,
    TicketClassificationResponse,
    SLAStatusResponse,
    SLASummaryResponse,
)
from ticket_engine.sla.application.services import (
    SLAService,
    ISLAPolicyProvider,
)

__all__ = [
    # DTOs
    "ClassifyTicketRequest",
    "ReclassifyTicketRequest",
    "SLAStatusQuery",
    "TicketSnapshot",
    "TicketClassificationResponse",
    "SLAStatusResponse",
    "SLASummaryResponse",
    # Services
    "SLAService",
    # Collaborator Interfaces
    "ISLAPolicyProvider",
]
