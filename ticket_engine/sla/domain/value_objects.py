"""
SLA Value Objects
==================

Immutable value objects for SLA domain.

Value objects are defined by their attributes rather than an identity.
They are immutable and can be freely shared.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ticket_engine.config import Priority, SlaLevel, SlaStatusColor


class BusinessHours(BaseModel):
    """Working window: hours in [start, end) on the given weekdays (Mon=0)."""
    model_config = ConfigDict(frozen=True)

    start: int = Field(default=9, ge=0, le=23, description="First business hour")
    end: int = Field(default=17, ge=1, le=24, description="Hour the window closes")
    days: Tuple[int, ...] = Field(
        default=(0, 1, 2, 3, 4),
        description="Working weekdays, datetime.weekday() numbering"
    )

    @model_validator(mode="after")
    def validate_window(self) -> "BusinessHours":
        if self.start >= self.end:
            raise ValueError("business hours start must be before end")
        if not self.days or any(d < 0 or d > 6 for d in self.days):
            raise ValueError("business days must be a non-empty subset of 0..6")
        return self

    def counts(self, moment: datetime) -> bool:
        """Whether the hour starting at ``moment`` is a business hour."""
        return moment.weekday() in self.days and self.start <= moment.hour < self.end


class EscalationThresholds(BaseModel):
    """Hours-remaining thresholds for the yellow and red states."""
    model_config = ConfigDict(frozen=True)

    warning: int = Field(ge=0)
    critical: int = Field(ge=0)

    @model_validator(mode="after")
    def validate_order(self) -> "EscalationThresholds":
        if self.critical > self.warning:
            raise ValueError("critical threshold cannot exceed warning threshold")
        return self


class SLAPolicy(BaseModel):
    """
    SLA policy: business hours, time budgets and escalation thresholds.

    The defaults are the production values. A YAML file may override any
    subset of them; missing levels fall back to the defaults.
    """
    model_config = ConfigDict(frozen=True)

    business_hours: BusinessHours = Field(default_factory=BusinessHours)
    resolution_hours: Dict[SlaLevel, int] = Field(
        default_factory=lambda: {
            SlaLevel.CRITICAL_SUPPORT: 4,
            SlaLevel.PREMIUM: 16,
            SlaLevel.STANDARD: 40,
        },
        description="Business hours until resolution is due"
    )
    response_hours: Dict[SlaLevel, int] = Field(
        default_factory=lambda: {
            SlaLevel.CRITICAL_SUPPORT: 1,
            SlaLevel.PREMIUM: 4,
            SlaLevel.STANDARD: 8,
        },
        description="Business hours until first response is due"
    )
    thresholds: Dict[SlaLevel, EscalationThresholds] = Field(
        default_factory=lambda: {
            SlaLevel.CRITICAL_SUPPORT: EscalationThresholds(warning=2, critical=1),
            SlaLevel.PREMIUM: EscalationThresholds(warning=8, critical=2),
            SlaLevel.STANDARD: EscalationThresholds(warning=24, critical=4),
        }
    )

    @field_validator("resolution_hours", "response_hours")
    @classmethod
    def validate_budgets(cls, v: Dict[SlaLevel, int], info) -> Dict[SlaLevel, int]:
        """Fill missing levels from the defaults and reject non-positive budgets."""
        defaults = cls.model_fields[info.field_name].default_factory()
        merged = {**defaults, **v}
        for level, hours in merged.items():
            if hours <= 0:
                raise ValueError(f"{info.field_name}[{level.value}] must be positive")
        return merged

    @field_validator("thresholds")
    @classmethod
    def validate_thresholds(
        cls, v: Dict[SlaLevel, EscalationThresholds]
    ) -> Dict[SlaLevel, EscalationThresholds]:
        defaults = cls.model_fields["thresholds"].default_factory()
        return {**defaults, **v}

    def resolution_budget(self, sla_level: SlaLevel) -> int:
        return self.resolution_hours[sla_level]

    def response_budget(self, sla_level: SlaLevel) -> int:
        return self.response_hours[sla_level]

    def thresholds_for(self, sla_level: SlaLevel) -> EscalationThresholds:
        return self.thresholds[sla_level]


DEFAULT_SLA_POLICY = SLAPolicy()


@dataclass(frozen=True)
class SLAStatus:
    """
    Immutable result of evaluating a due date against "now".

    ``time_remaining_hours`` is rounded up and floored at zero for display.
    """
    is_breached: bool
    is_approaching_breach: bool
    time_remaining_hours: int
    status: SlaStatusColor

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "is_breached": self.is_breached,
            "is_approaching_breach": self.is_approaching_breach,
            "time_remaining_hours": self.time_remaining_hours,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class TicketClassification:
    """The derived triple that always changes together."""
    priority: Priority
    sla_level: SlaLevel
    due_date: datetime

