"""
Shared pytest fixtures for the ticket engine tests.

All dates are fixed: 2024-01-08 is a Monday.
"""

from datetime import datetime
from typing import List

import pytest

from ticket_engine.config import Role
from ticket_engine.access.application import ActorContext
from ticket_engine.sla.application import SLAService
from ticket_engine.sla.infrastructure import SLAPolicyLoader
from ticket_engine.triage.application import IStaffRosterProvider
from ticket_engine.triage.domain import StaffCandidate


MONDAY = datetime(2024, 1, 8, 9, 0)


class StaticRoster(IStaffRosterProvider):
    """In-memory roster provider."""

    def __init__(self, candidates: List[StaffCandidate]):
        self.candidates = list(candidates)
        self.calls = 0

    def get_candidates(self) -> List[StaffCandidate]:
        self.calls += 1
        return list(self.candidates)


def staff(id: str, *roles: Role, workload: int = 0) -> StaffCandidate:
    """Shorthand for building roster entries."""
    return StaffCandidate.of(id, roles or (Role.SUPPORT_STAFF,), workload)


@pytest.fixture
def monday_9am() -> datetime:
    return MONDAY


@pytest.fixture
def sla_service() -> SLAService:
    return SLAService(SLAPolicyLoader())


@pytest.fixture
def roster() -> StaticRoster:
    return StaticRoster([
        staff("staff-busy", Role.SUPPORT_STAFF, workload=6),
        staff("staff-free", Role.SUPPORT_STAFF, workload=1),
        staff("manager", Role.SUPPORT_MANAGER, workload=3),
    ])


@pytest.fixture
def make_roster():
    """Factory for rosters built from (id, roles, workload) tuples."""

    def _make(*entries) -> StaticRoster:
        return StaticRoster([StaffCandidate.of(*entry) for entry in entries])

    return _make


@pytest.fixture
def end_user() -> ActorContext:
    return ActorContext(id="user-1", role=Role.END_USER)


@pytest.fixture
def support_staff() -> ActorContext:
    return ActorContext(id="staff-1", role=Role.SUPPORT_STAFF)


@pytest.fixture
def manager() -> ActorContext:
    return ActorContext(id="manager-1", role=Role.SUPPORT_MANAGER)


@pytest.fixture
def admin() -> ActorContext:
    return ActorContext(id="admin-1", role=Role.ADMIN)
