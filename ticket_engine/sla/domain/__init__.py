"""
SLA Domain Layer
================

Domain layer for ticket prioritization and SLA tracking.

Contains:
- Entities: Core business objects with identity (Ticket)
- Value Objects: Immutable objects defined by attributes (SLAPolicy, SLAStatus)
- Domain Services: Stateless business logic (SLACalculator)

This layer has no dependencies on infrastructure - pure Python business logic.
"""

from ticket_engine.sla.domain.entities import Ticket
from ticket_engine.sla.domain.calculator import SLACalculator, PRIORITY_MATRIX
from ticket_engine.sla.domain.value_objects import (
    BusinessHours,
    EscalationThresholds,
    SLAPolicy,
    SLAStatus,
    TicketClassification,
    DEFAULT_SLA_POLICY,
)

__all__ = [
    # Entities
    "Ticket",
    # Value Objects & Services
    "SLACalculator",
    "PRIORITY_MATRIX",
    "BusinessHours",
    "EscalationThresholds",
    "SLAPolicy",
    "SLAStatus",
    "TicketClassification",
    "DEFAULT_SLA_POLICY",
]
