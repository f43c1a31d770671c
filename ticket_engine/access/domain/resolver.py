"""
Permission Resolver
===================

Decides whether a role may perform an action on a resource.

Pure over its inputs. Looking up the actor's current role is the
caller's job.
"""

from typing import Mapping, Optional

from ticket_engine.config import Role
from ticket_engine.access.domain.catalog import DEFAULT_CATALOG, PermissionCatalog


class PermissionResolver:
    """Default-deny, first-match permission check against a catalog."""

    def __init__(self, catalog: PermissionCatalog = DEFAULT_CATALOG):
        self._catalog = catalog

    @property
    def catalog(self) -> PermissionCatalog:
        return self._catalog

    def has_permission(
        self,
        role: Role,
        resource: str,
        action: str,
        context: Optional[Mapping[str, str]] = None
    ) -> bool:
        """
        Check a role against its permission list.

        Args:
            role: Actor's active role
            resource: Resource name, e.g. "tickets"
            action: Action name, e.g. "read"
            context: Facts about the request, e.g. {"requester": "self"}

        Returns:
            True on the first matching permission, False otherwise
        """
        if role == Role.ADMIN:
            return True

        return any(
            permission.matches(resource, action, context)
            for permission in self._catalog.permissions_for(role)
        )


DEFAULT_RESOLVER = PermissionResolver()
