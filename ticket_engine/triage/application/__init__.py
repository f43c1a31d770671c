"""
Triage Application Layer
=========================

Application layer for ticket triage.

Contains:
- Services: Assignment orchestration
- DTOs: Data transfer objects for the boundary
"""

from ticket_engine.triage.application.dto import (
    StaffCandidateDTO,
    AssignmentRequest,
    AssignmentResponse,
)
from ticket_engine.triage.application.services import (
    AssignmentService,
    IStaffRosterProvider,
)

__all__ = [
    # DTOs
    "StaffCandidateDTO",
    "AssignmentRequest",
    "AssignmentResponse",
    # Services
    "AssignmentService",
    # Collaborator Interfaces
    "IStaffRosterProvider",
]
