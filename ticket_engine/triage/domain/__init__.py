"""
Triage Domain Layer
===================

Domain layer for ticket triage.

Contains:
- Entities: StaffCandidate
- Domain Services: AssignmentBalancer

This layer is framework-agnostic and contains pure business logic.
"""

from ticket_engine.triage.domain.entities import StaffCandidate
from ticket_engine.triage.domain.balancer import AssignmentBalancer, PREMIUM_ROLES

__all__ = [
    "StaffCandidate",
    "AssignmentBalancer",
    "PREMIUM_ROLES",
]
