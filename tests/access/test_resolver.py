"""
Tests for PermissionResolver against the built-in catalog.
"""

import pytest

from ticket_engine.config import Action, Resource, Role
from ticket_engine.access.domain import (
    DEFAULT_RESOLVER,
    Permission,
    PermissionCatalog,
    PermissionResolver,
    SELF,
)

resolver = DEFAULT_RESOLVER


class TestAdmin:
    """Admins bypass the catalog."""

    @pytest.mark.parametrize("resource", ["tickets", "users", "billing", "anything"])
    @pytest.mark.parametrize("action", ["read", "delete", "launch"])
    @pytest.mark.parametrize("context", [
        None,
        {},
        {"requester": "other"},
        {"scope": "none"},
        {"assignedTo": "someone-else", "role": "END_USER"},
    ])
    def test_everything_allowed(self, resource, action, context):
        assert resolver.has_permission(Role.ADMIN, resource, action, context) is True

    def test_allowed_with_empty_catalog(self):
        empty = PermissionResolver(PermissionCatalog({}))
        assert empty.has_permission(Role.ADMIN, Resource.USERS, Action.DELETE) is True


class TestSupportManager:
    """Manager grants."""

    @pytest.mark.parametrize("action", ["read", "create", "update", "delete", "assign"])
    def test_ticket_actions(self, action):
        assert resolver.has_permission(Role.SUPPORT_MANAGER, Resource.TICKETS, action)

    def test_no_ticket_comment(self):
        assert not resolver.has_permission(
            Role.SUPPORT_MANAGER, Resource.TICKETS, Action.COMMENT
        )

    def test_users_limited_to_support_staff(self):
        assert resolver.has_permission(
            Role.SUPPORT_MANAGER, Resource.USERS, Action.UPDATE,
            {"role": Role.SUPPORT_STAFF.value}
        )
        assert not resolver.has_permission(
            Role.SUPPORT_MANAGER, Resource.USERS, Action.UPDATE,
            {"role": Role.END_USER.value}
        )
        assert not resolver.has_permission(
            Role.SUPPORT_MANAGER, Resource.USERS, Action.READ
        )

    def test_reports_and_categories(self):
        assert resolver.has_permission(Role.SUPPORT_MANAGER, Resource.REPORTS, Action.READ)
        assert resolver.has_permission(
            Role.SUPPORT_MANAGER, Resource.CATEGORIES, Action.CREATE
        )
        assert not resolver.has_permission(
            Role.SUPPORT_MANAGER, Resource.CATEGORIES, Action.DELETE
        )


class TestSupportStaff:
    """Staff grants."""

    def test_read_any_ticket(self):
        assert resolver.has_permission(Role.SUPPORT_STAFF, Resource.TICKETS, Action.READ)

    def test_update_only_assigned(self):
        assert resolver.has_permission(
            Role.SUPPORT_STAFF, Resource.TICKETS, Action.UPDATE, {"assignedTo": SELF}
        )
        assert not resolver.has_permission(
            Role.SUPPORT_STAFF, Resource.TICKETS, Action.UPDATE
        )
        assert not resolver.has_permission(
            Role.SUPPORT_STAFF, Resource.TICKETS, Action.UPDATE, {"requester": SELF}
        )

    def test_comment_on_assigned(self):
        assert resolver.has_permission(
            Role.SUPPORT_STAFF, Resource.TICKETS, Action.COMMENT, {"assignedTo": SELF}
        )

    def test_cannot_create_or_delete(self):
        for action in (Action.CREATE, Action.DELETE, Action.ASSIGN):
            assert not resolver.has_permission(
                Role.SUPPORT_STAFF, Resource.TICKETS, action, {"assignedTo": SELF}
            )

    def test_basic_reports_only(self):
        assert resolver.has_permission(
            Role.SUPPORT_STAFF, Resource.REPORTS, Action.READ, {"scope": "basic"}
        )
        assert not resolver.has_permission(
            Role.SUPPORT_STAFF, Resource.REPORTS, Action.READ
        )
        assert not resolver.has_permission(
            Role.SUPPORT_STAFF, Resource.REPORTS, Action.READ, {"scope": "full"}
        )

    def test_read_users_not_update(self):
        assert resolver.has_permission(Role.SUPPORT_STAFF, Resource.USERS, Action.READ)
        assert not resolver.has_permission(Role.SUPPORT_STAFF, Resource.USERS, Action.UPDATE)


class TestEndUser:
    """End-user grants."""

    @pytest.mark.parametrize("action", ["read", "create", "update", "comment"])
    def test_own_tickets(self, action):
        assert resolver.has_permission(
            Role.END_USER, Resource.TICKETS, action, {"requester": SELF}
        )

    def test_others_tickets_denied(self):
        assert not resolver.has_permission(Role.END_USER, Resource.TICKETS, Action.READ)
        assert not resolver.has_permission(
            Role.END_USER, Resource.TICKETS, Action.READ, {"requester": "someone"}
        )

    def test_cannot_delete_own_ticket(self):
        assert not resolver.has_permission(
            Role.END_USER, Resource.TICKETS, Action.DELETE, {"requester": SELF}
        )

    def test_own_profile(self):
        assert resolver.has_permission(
            Role.END_USER, Resource.USERS, Action.UPDATE, {"id": SELF}
        )
        assert not resolver.has_permission(Role.END_USER, Resource.USERS, Action.READ)

    def test_no_reports(self):
        assert not resolver.has_permission(Role.END_USER, Resource.REPORTS, Action.READ)


class TestCustomCatalog:
    """Resolver over an injected catalog."""

    def test_first_match(self):
        catalog = PermissionCatalog({
            Role.END_USER: (
                Permission(
                    id="kb", name="Knowledge Base", description="",
                    resource="articles", action="read",
                ),
            ),
        })
        custom = PermissionResolver(catalog)
        assert custom.has_permission(Role.END_USER, "articles", "read") is True
        assert custom.has_permission(Role.END_USER, Resource.TICKETS, Action.READ) is False
        assert custom.has_permission(Role.SUPPORT_STAFF, "articles", "read") is False

    def test_unknown_role_denied(self):
        assert resolver.has_permission("GUEST", Resource.TICKETS, Action.READ) is False
