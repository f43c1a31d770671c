"""
Access Module
=============

Bounded Context for role-based authorization.

Responsibilities:
- Hold the static role -> permission catalog
- Resolve role permissions for resource/action requests
- Apply ownership and assignment rules to ticket and user records
"""

__version__ = "1.0.0"
