"""
Triage Application DTOs
=======================

Pydantic models for the assignment boundary.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from ticket_engine.config import Priority, Role, SlaLevel
from ticket_engine.triage.domain import StaffCandidate


class StaffCandidateDTO(BaseModel):
    """Roster entry as supplied by the staff roster provider."""
    id: str = Field(..., min_length=1, description="Staff user id")
    roles: List[Role] = Field(default_factory=list, description="Roles held")
    current_workload: int = Field(default=0, ge=0, description="Open tickets assigned")

    def to_domain(self) -> StaffCandidate:
        return StaffCandidate.of(self.id, self.roles, self.current_workload)


class AssignmentRequest(BaseModel):
    """Ticket attributes the balancer needs."""
    ticket_id: str = Field(..., min_length=1)
    priority: Priority
    sla_level: SlaLevel


class AssignmentResponse(BaseModel):
    """Outcome of an auto-assignment attempt."""
    ticket_id: str
    assignee_id: Optional[str] = Field(None, description="Chosen staff id, if any")
    needs_manual_triage: bool = Field(
        ...,
        description="True when nobody could be assigned automatically"
    )
    candidates_considered: int = Field(default=0, ge=0)
