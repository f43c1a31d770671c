"""
SLA Infrastructure Layer
=========================

Infrastructure implementations for the SLA engine:
- Policy loader: YAML SLA policy, read once at startup
"""

from ticket_engine.sla.infrastructure.policy_loader import SLAPolicyLoader

__all__ = [
    "SLAPolicyLoader",
]
