"""
SLA Module
==========

Bounded Context for ticket prioritization and service level agreements.

Responsibilities:
- Derive priority from impact and urgency
- Derive SLA level from priority and impact
- Calculate due dates and response deadlines in business hours
- Evaluate breach and warning status
- Report SLA compliance
"""

__version__ = "1.0.0"
