"""
Tests for the engine composition root.
"""

import logging

import pytest

from ticket_engine.config import Impact, Urgency, Priority, SlaLevel, Settings
from ticket_engine.core.exceptions import AccessDeniedException, ConfigurationException
from ticket_engine.main import create_engine
from ticket_engine.sla.application import ClassifyTicketRequest


@pytest.fixture
def engine(roster):
    return create_engine(roster, Settings(), configure_logging=False)


class TestCreateEngine:
    """Wiring from settings."""

    def test_logs_startup(self, roster, caplog):
        with caplog.at_level(logging.INFO):
            create_engine(roster, Settings(), configure_logging=False)
        assert "Ticket engine started" in caplog.messages

    def test_policy_path_from_settings(self, roster, tmp_path, monday_9am):
        path = tmp_path / "policy.yaml"
        path.write_text("resolution_hours:\n  STANDARD: 8\n")
        engine = create_engine(
            roster, Settings(sla_policy_path=path), configure_logging=False
        )
        response = engine.sla.classify(ClassifyTicketRequest(
            impact=Impact.MINOR, urgency=Urgency.LOW, created_at=monday_9am
        ))
        assert response.due_date.day == 9

    def test_invalid_policy_fails_startup(self, roster, tmp_path):
        path = tmp_path / "policy.yaml"
        path.write_text("resolution_hours:\n  STANDARD: 0\n")
        with pytest.raises(ConfigurationException):
            create_engine(roster, Settings(sla_policy_path=path), configure_logging=False)

    def test_auto_assign_disabled(self, roster, end_user, monday_9am):
        engine = create_engine(
            roster, Settings(auto_assign_enabled=False), configure_logging=False
        )
        created = engine.create_ticket(end_user, "T-1", ClassifyTicketRequest(
            impact=Impact.MINOR, urgency=Urgency.LOW, created_at=monday_9am
        ))
        assert created.ticket.assigned_to_id is None
        assert created.assignment.needs_manual_triage is True


class TestCreateTicket:
    """End-to-end ticket creation."""

    def test_end_user_creates_ticket(self, engine, end_user, monday_9am):
        created = engine.create_ticket(end_user, "T-1", ClassifyTicketRequest(
            impact=Impact.MINOR, urgency=Urgency.LOW, created_at=monday_9am
        ))
        ticket = created.ticket
        assert ticket.requester_id == "user-1"
        assert ticket.priority == Priority.LOW
        assert ticket.sla_level == SlaLevel.STANDARD
        assert ticket.assigned_to_id == "staff-free"
        assert created.assignment.needs_manual_triage is False

    def test_critical_ticket_goes_to_manager(self, engine, end_user, monday_9am):
        created = engine.create_ticket(end_user, "T-2", ClassifyTicketRequest(
            impact=Impact.CRITICAL, urgency=Urgency.IMMEDIATE, created_at=monday_9am
        ))
        assert created.ticket.sla_level == SlaLevel.CRITICAL_SUPPORT
        assert created.ticket.assigned_to_id == "manager"

    def test_manager_may_create(self, engine, manager, monday_9am):
        created = engine.create_ticket(manager, "T-3", ClassifyTicketRequest(
            impact=Impact.MODERATE, urgency=Urgency.NORMAL, created_at=monday_9am
        ))
        assert created.ticket.requester_id == "manager-1"

    def test_staff_may_not_create(self, engine, support_staff, monday_9am):
        with pytest.raises(AccessDeniedException):
            engine.create_ticket(support_staff, "T-4", ClassifyTicketRequest(
                impact=Impact.MINOR, urgency=Urgency.LOW, created_at=monday_9am
            ))
