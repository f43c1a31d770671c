"""
Shared Kernel Module
====================

Shared infrastructure used across all bounded contexts (SLA, Triage,
Access).

DO NOT add business logic from SLA, Triage or Access to shared kernel.
"""
