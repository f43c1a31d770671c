"""
Tests for AuthorizationService.
"""

import logging

import pytest

from ticket_engine.config import Action, Resource, Role
from ticket_engine.core.exceptions import AccessDeniedException
from ticket_engine.access.application import (
    AuthorizationService,
    ticket_context,
    user_context,
)
from ticket_engine.access.domain import SELF, TicketRecord, UserRecord

TICKET = TicketRecord(id="T-1", requester_id="user-1", assigned_to_id="staff-1")


class TestContexts:
    """Condition facts derived from records."""

    def test_ticket_context_requester(self):
        assert ticket_context("user-1", TICKET) == {"requester": SELF}

    def test_ticket_context_assignee(self):
        assert ticket_context("staff-1", TICKET) == {"assignedTo": SELF}

    def test_ticket_context_stranger(self):
        assert ticket_context("other", TICKET) == {}

    def test_ticket_context_unassigned(self):
        ticket = TicketRecord(id="T-2", requester_id="user-1")
        assert ticket_context("user-1", ticket) == {"requester": SELF}

    def test_user_context(self):
        target = UserRecord(id="staff-1", role=Role.SUPPORT_STAFF)
        assert user_context("manager-1", target) == {"role": "SUPPORT_STAFF"}
        assert user_context("staff-1", target) == {"role": "SUPPORT_STAFF", "id": SELF}


class TestTicketChecks:
    """Resolver and gate combined."""

    def test_end_user_own_ticket(self, end_user):
        service = AuthorizationService()
        assert service.can_access_ticket(end_user, TICKET) is True
        assert service.can_access_ticket(end_user, TICKET, Action.COMMENT) is True
        assert service.can_access_ticket(end_user, TICKET, Action.DELETE) is False

    def test_end_user_foreign_ticket(self, end_user):
        ticket = TicketRecord(id="T-9", requester_id="user-9")
        assert AuthorizationService().can_access_ticket(end_user, ticket) is False

    def test_staff_assigned_ticket(self, support_staff):
        service = AuthorizationService()
        assert service.can_access_ticket(support_staff, TICKET, Action.UPDATE) is True

    def test_staff_unassigned_ticket(self, support_staff):
        ticket = TicketRecord(id="T-9", requester_id="user-9", assigned_to_id="staff-2")
        service = AuthorizationService()
        assert service.can_access_ticket(support_staff, ticket) is True
        assert service.can_access_ticket(support_staff, ticket, Action.UPDATE) is False

    def test_manager_cannot_comment(self, manager):
        service = AuthorizationService()
        assert service.can_access_ticket(manager, TICKET, Action.ASSIGN) is True
        assert service.can_access_ticket(manager, TICKET, Action.COMMENT) is False

    def test_admin_everything(self, admin):
        service = AuthorizationService()
        assert service.can_access_ticket(admin, TICKET, Action.COMMENT) is True
        assert service.can(admin, "billing", "export") is True


class TestUserChecks:
    """Target-user checks."""

    def test_manager_manages_staff(self, manager):
        service = AuthorizationService()
        staff = UserRecord(id="staff-1", role=Role.SUPPORT_STAFF)
        customer = UserRecord(id="user-1", role=Role.END_USER)
        assert service.can_access_user(manager, staff, Action.UPDATE) is True
        assert service.can_access_user(manager, customer) is False

    def test_end_user_own_profile(self, end_user):
        service = AuthorizationService()
        assert service.can_access_user(
            end_user, UserRecord(id="user-1", role=Role.END_USER), Action.UPDATE
        ) is True
        assert service.can_access_user(
            end_user, UserRecord(id="user-2", role=Role.END_USER)
        ) is False

    def test_staff_reads_users(self, support_staff):
        service = AuthorizationService()
        target = UserRecord(id="user-1", role=Role.END_USER)
        assert service.can_access_user(support_staff, target) is True
        assert service.can_access_user(support_staff, target, Action.UPDATE) is False


class TestRequire:
    """Raising variants."""

    def test_require_passes(self, end_user):
        AuthorizationService().require(
            end_user, Resource.TICKETS, Action.CREATE, {"requester": SELF}
        )

    def test_require_raises(self, end_user):
        with pytest.raises(AccessDeniedException) as exc_info:
            AuthorizationService().require(end_user, Resource.REPORTS, Action.READ)
        error = exc_info.value
        assert error.actor_id == "user-1"
        assert error.resource == Resource.REPORTS
        assert error.action == Action.READ
        assert error.message == "Actor 'user-1' may not read reports"

    def test_require_ticket_access(self, end_user):
        with pytest.raises(AccessDeniedException):
            AuthorizationService().require_ticket_access(
                end_user, TicketRecord(id="T-9", requester_id="user-9")
            )

    def test_require_user_access(self, support_staff):
        with pytest.raises(AccessDeniedException):
            AuthorizationService().require_user_access(
                support_staff, UserRecord(id="user-1", role=Role.END_USER), Action.DELETE
            )


class TestDenialLogging:
    """Denials are logged with their context."""

    def test_denial_logged(self, end_user, caplog):
        with caplog.at_level(logging.WARNING):
            AuthorizationService().can(end_user, Resource.REPORTS, Action.READ)
        record = next(r for r in caplog.records if r.message == "Permission denied")
        assert record.actor_id == "user-1"
        assert record.role == "END_USER"
        assert record.resource == "reports"
        assert record.action == "read"

    def test_denial_carries_correlation_id(self, end_user, caplog):
        service = AuthorizationService(correlation_id="req-42")
        with caplog.at_level(logging.WARNING):
            service.can_access_ticket(
                end_user, TicketRecord(id="T-9", requester_id="user-9")
            )
        record = next(r for r in caplog.records if r.message == "Permission denied")
        assert record.correlation_id == "req-42"
        assert record.ticket_id == "T-9"

    def test_allowed_not_logged(self, admin, caplog):
        with caplog.at_level(logging.WARNING):
            AuthorizationService().can(admin, Resource.USERS, Action.DELETE)
        assert "Permission denied" not in caplog.messages


class TestListRolePermissions:
    """Catalog views."""

    def test_lists_every_role(self):
        listing = AuthorizationService().list_role_permissions()
        assert [entry.role for entry in listing] == [
            Role.ADMIN, Role.SUPPORT_MANAGER, Role.SUPPORT_STAFF, Role.END_USER
        ]

    def test_serializes_conditions(self):
        listing = AuthorizationService().list_role_permissions()
        staff = next(entry for entry in listing if entry.role == Role.SUPPORT_STAFF)
        first = staff.permissions[0]
        assert first.id == "staff-tickets"
        assert first.actions == ["read", "update", "comment"]
        assert first.conditions == {"assignedTo": "self"}
