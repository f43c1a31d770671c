"""
SLA Policy Loader
=================

Loads the SLA policy (business hours, budgets, thresholds) from YAML.

The policy is read once at startup and is immutable afterwards; there is
no hot reload. A missing file means the built-in defaults apply.

Example file:

    business_hours:
      start: 8
      end: 18
      days: [0, 1, 2, 3, 4]
    resolution_hours:
      PREMIUM: 12
    thresholds:
      STANDARD: {warning: 16, critical: 4}
"""

import threading
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from ticket_engine.core.exceptions import ConfigurationException
from ticket_engine.shared.infrastructure.logging import get_logger
from ticket_engine.sla.application.services import ISLAPolicyProvider
from ticket_engine.sla.domain.value_objects import DEFAULT_SLA_POLICY, SLAPolicy

logger = get_logger(__name__)


class SLAPolicyLoader(ISLAPolicyProvider):
    """
    Thread-safe, load-once SLA policy provider.

    ``get_policy`` loads lazily on first use; concurrent first calls
    parse the file only once.
    """

    def __init__(self, path: Optional[Path] = None):
        self._path = Path(path) if path is not None else None
        self._policy: Optional[SLAPolicy] = None
        self._lock = threading.Lock()

    def load(self) -> SLAPolicy:
        """Load the policy if it has not been loaded yet."""
        with self._lock:
            if self._policy is None:
                self._policy = self._load_from_file(self._path)
            return self._policy

    def get_policy(self) -> SLAPolicy:
        if self._policy is not None:
            return self._policy
        return self.load()

    @staticmethod
    def _load_from_file(path: Optional[Path]) -> SLAPolicy:
        """Load and parse YAML policy file."""
        if path is None:
            return DEFAULT_SLA_POLICY

        if not path.exists():
            logger.warning(
                "SLA policy file not found, using defaults",
                extra={"path": str(path)}
            )
            return DEFAULT_SLA_POLICY

        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationException(
                f"SLA policy file is not valid YAML: {path}",
                {"path": str(path), "error": str(e)}
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationException(
                f"SLA policy file must contain a mapping: {path}",
                {"path": str(path)}
            )

        try:
            policy = SLAPolicy(**data)
        except ValidationError as e:
            raise ConfigurationException(
                f"Invalid SLA policy in {path}",
                {"path": str(path), "errors": e.errors(include_url=False)}
            ) from e

        logger.info("SLA policy loaded", extra={"path": str(path)})
        return policy
