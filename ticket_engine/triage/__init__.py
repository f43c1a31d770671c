"""
Triage Module
=============

Bounded Context for ticket triage.

Responsibilities:
- Choose an assignee for new tickets from the live staff roster
- Respect SLA-level role eligibility
- Prefer managers for critical-priority tickets
- Report tickets that need manual triage
"""

__version__ = "1.0.0"
