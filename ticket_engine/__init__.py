"""
Ticket Engine
=============

Decision core of the support-ticket system.

Modules:
- SLA: priority, SLA level, due dates and breach status
- Triage: least-loaded auto-assignment
- Access: role permission catalog, resolver and record access gate

Clean Architecture Layers:
- Application: Services and DTOs
- Domain: Entities, value objects and pure decision logic
- Infrastructure: SLA policy loading
"""

__version__ = "1.0.0"
