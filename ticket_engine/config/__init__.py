"""
Configuration Module
====================

Application settings and domain constants.

Settings are loaded from the environment using Pydantic. The enums below
are closed sets: every consumer matches on them exhaustively.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety.
    """

    # ========== Application ==========
    app_name: str = Field(default="ticket-engine", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Enable debug mode")

    # ========== Logging ==========
    log_level: str = Field(default="INFO", description="Root log level")

    # ========== SLA Policy ==========
    sla_policy_path: Optional[Path] = Field(
        default=None,
        description="Optional YAML file overriding business hours, budgets and thresholds"
    )

    # ========== Assignment ==========
    auto_assign_enabled: bool = Field(
        default=True,
        description="Run the assignment balancer when a ticket is created"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is one of allowed values."""
        allowed = {"development", "staging", "production"}
        if v not in allowed:
            raise ValueError(f"environment must be one of {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise and check the log level name."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return v.upper()


@lru_cache()
def get_settings() -> Settings:
    """Returns cached Settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


# ========== Constants ==========

class Impact(str, Enum):
    """Breadth of effect of a reported problem."""
    MINOR = "MINOR"
    MODERATE = "MODERATE"
    MAJOR = "MAJOR"
    CRITICAL = "CRITICAL"


class Urgency(str, Enum):
    """How quickly the requester needs resolution."""
    LOW = "LOW"
    NORMAL = "NORMAL"
    HIGH = "HIGH"
    IMMEDIATE = "IMMEDIATE"


class Priority(str, Enum):
    """Derived queueing weight. Never set directly."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class SlaLevel(str, Enum):
    """Service tier determining time budgets."""
    STANDARD = "STANDARD"
    PREMIUM = "PREMIUM"
    CRITICAL_SUPPORT = "CRITICAL_SUPPORT"


class SlaStatusColor(str, Enum):
    """Traffic-light SLA status."""
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


class TicketStatus(str, Enum):
    """Ticket lifecycle statuses (input only, no transitions here)."""
    NEW = "NEW"
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    ON_HOLD = "ON_HOLD"
    RESOLVED = "RESOLVED"
    CLOSED = "CLOSED"


class Role(str, Enum):
    """Actor authorization class, highest precedence first."""
    ADMIN = "ADMIN"
    SUPPORT_MANAGER = "SUPPORT_MANAGER"
    SUPPORT_STAFF = "SUPPORT_STAFF"
    END_USER = "END_USER"


class Resource:
    """Resource names used by the permission catalog."""
    ANY = "*"
    TICKETS = "tickets"
    USERS = "users"
    REPORTS = "reports"
    CATEGORIES = "categories"


class Action:
    """Action names used by the permission catalog."""
    ANY = "*"
    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    ASSIGN = "assign"
    COMMENT = "comment"


# ========== Lists for validation ==========

VALID_ROLES = list(Role)
CLOSED_STATUSES = frozenset({TicketStatus.RESOLVED, TicketStatus.CLOSED})
MANAGER_ROLES = frozenset({Role.SUPPORT_MANAGER, Role.ADMIN})
