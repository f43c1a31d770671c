"""
SLA Application DTOs
=====================

Data Transfer Objects for the SLA engine boundary.

These Pydantic models handle serialization/deserialization and validation.
Enum fields reject unknown values, so the domain layer only ever sees
members of the closed enums.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ticket_engine.config import Impact, Urgency, Priority, SlaLevel, TicketStatus


SLAStatusStr = Literal["green", "yellow", "red"]


# ========== Request DTOs ==========

class ClassifyTicketRequest(BaseModel):
    """Inputs needed to derive a ticket's priority, SLA level and due date."""
    model_config = ConfigDict(frozen=True)

    impact: Impact = Field(..., description="Breadth of effect")
    urgency: Urgency = Field(..., description="How soon it must be resolved")
    created_at: datetime = Field(..., description="Ticket creation timestamp")


class ReclassifyTicketRequest(BaseModel):
    """Impact and/or urgency edit."""
    impact: Optional[Impact] = None
    urgency: Optional[Urgency] = None

    @model_validator(mode="after")
    def validate_not_empty(self) -> "ReclassifyTicketRequest":
        """At least one of impact or urgency must be supplied."""
        if self.impact is None and self.urgency is None:
            raise ValueError("impact or urgency is required")
        return self


class SLAStatusQuery(BaseModel):
    """Ad-hoc status evaluation for a stored due date."""
    due_date: datetime
    sla_level: SlaLevel
    now: datetime


class TicketSnapshot(BaseModel):
    """Ticket fields supplied by the ticket store for SLA reporting."""
    id: str = Field(..., min_length=1)
    status: TicketStatus
    sla_level: SlaLevel
    due_date: Optional[datetime] = None
    closed_at: Optional[datetime] = None


# ========== Response DTOs ==========

class TicketClassificationResponse(BaseModel):
    """Derived SLA fields to persist back to the ticket store."""
    priority: Priority
    sla_level: SlaLevel
    due_date: datetime
    response_deadline: datetime


class SLAStatusResponse(BaseModel):
    """Response model for SLA status of a single ticket."""
    is_breached: bool = Field(..., description="Whether the due date has passed")
    is_approaching_breach: bool = Field(..., description="Within the warning threshold")
    time_remaining_hours: int = Field(..., ge=0, description="Hours left, rounded up")
    status: SLAStatusStr = Field(..., description="Traffic-light status")


class SLASummaryResponse(BaseModel):
    """Breach overview across a set of tickets."""
    total_open: int
    breached: List[str] = Field(default_factory=list, description="Breached ticket ids")
    approaching: List[str] = Field(
        default_factory=list,
        description="Ticket ids inside the warning threshold"
    )
    on_track: List[str] = Field(default_factory=list)
    compliance_rate: int = Field(..., ge=0, le=100, description="Percent closed on time")
