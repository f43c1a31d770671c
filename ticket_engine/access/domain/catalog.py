"""
Permission Catalog
==================

Static role -> permission table.

Built once at import and immutable afterwards: permission lists are
tuples and the role index is a read-only mapping. There is no runtime
editing of permissions.
"""

from types import MappingProxyType
from typing import Mapping, Tuple, assert_never

from ticket_engine.config import Action, Resource, Role, VALID_ROLES
from ticket_engine.access.domain.entities import Permission, RolePermissionSet, SELF


def _actions(*actions: str) -> str:
    return ",".join(actions)


def _permissions_for(role: Role) -> Tuple[Permission, ...]:
    match role:
        case Role.ADMIN:
            return (
                Permission(
                    id="admin-all",
                    name="Full System Access",
                    description="Complete access to all system features",
                    resource=Resource.ANY,
                    action=Action.ANY,
                ),
            )
        case Role.SUPPORT_MANAGER:
            return (
                Permission(
                    id="manager-tickets",
                    name="Manage All Tickets",
                    description="View, create, update, assign, and close all tickets",
                    resource=Resource.TICKETS,
                    action=_actions(
                        Action.READ, Action.CREATE, Action.UPDATE,
                        Action.DELETE, Action.ASSIGN
                    ),
                ),
                Permission(
                    id="manager-users",
                    name="Manage Support Staff",
                    description="View and manage support staff users",
                    resource=Resource.USERS,
                    action=_actions(Action.READ, Action.UPDATE),
                    conditions={"role": Role.SUPPORT_STAFF.value},
                ),
                Permission(
                    id="manager-reports",
                    name="View Reports",
                    description="Access to all reports and analytics",
                    resource=Resource.REPORTS,
                    action=Action.READ,
                ),
                Permission(
                    id="manager-categories",
                    name="Manage Categories",
                    description="Create and update ticket categories",
                    resource=Resource.CATEGORIES,
                    action=_actions(Action.READ, Action.CREATE, Action.UPDATE),
                ),
            )
        case Role.SUPPORT_STAFF:
            return (
                Permission(
                    id="staff-tickets",
                    name="Manage Assigned Tickets",
                    description="View and manage assigned tickets",
                    resource=Resource.TICKETS,
                    action=_actions(Action.READ, Action.UPDATE, Action.COMMENT),
                    conditions={"assignedTo": SELF},
                ),
                Permission(
                    id="staff-all-tickets",
                    name="View All Tickets",
                    description="View all tickets for reference",
                    resource=Resource.TICKETS,
                    action=Action.READ,
                ),
                Permission(
                    id="staff-users",
                    name="View Users",
                    description="View user information",
                    resource=Resource.USERS,
                    action=Action.READ,
                ),
                Permission(
                    id="staff-reports",
                    name="View Basic Reports",
                    description="Access to basic reports",
                    resource=Resource.REPORTS,
                    action=Action.READ,
                    conditions={"scope": "basic"},
                ),
            )
        case Role.END_USER:
            return (
                Permission(
                    id="user-own-tickets",
                    name="Manage Own Tickets",
                    description="Create and view own tickets",
                    resource=Resource.TICKETS,
                    action=_actions(
                        Action.READ, Action.CREATE, Action.UPDATE, Action.COMMENT
                    ),
                    conditions={"requester": SELF},
                ),
                Permission(
                    id="user-profile",
                    name="Manage Profile",
                    description="Update own profile information",
                    resource=Resource.USERS,
                    action=_actions(Action.READ, Action.UPDATE),
                    conditions={"id": SELF},
                ),
            )
        case _:
            assert_never(role)


class PermissionCatalog:
    """
    Immutable role -> permissions table.

    Unknown roles have no permissions.
    """

    def __init__(self, table: Mapping[Role, Tuple[Permission, ...]]):
        self._table: Mapping[Role, Tuple[Permission, ...]] = MappingProxyType(
            {role: tuple(perms) for role, perms in table.items()}
        )

    @classmethod
    def default(cls) -> "PermissionCatalog":
        """The built-in catalog covering every role."""
        return cls({role: _permissions_for(role) for role in VALID_ROLES})

    def permissions_for(self, role: Role) -> Tuple[Permission, ...]:
        """Permissions for a role, in match order."""
        return self._table.get(role, ())

    def all_role_permissions(self) -> Tuple[RolePermissionSet, ...]:
        """Every role with its permissions, in role precedence order."""
        return tuple(
            RolePermissionSet(role=role, permissions=perms)
            for role, perms in self._table.items()
        )

    def roles(self) -> Tuple[Role, ...]:
        return tuple(self._table)


DEFAULT_CATALOG = PermissionCatalog.default()
