"""
Core Module
============

Shared core utilities and abstractions used across the application.

This module contains framework-agnostic code that defines the fundamental
building blocks of the system.
"""

from ticket_engine.core.exceptions import (
    ApplicationException,
    DomainException,
    ValidationException,
    ConfigurationException,
    AccessDeniedException,
)

__all__ = [
    "ApplicationException",
    "DomainException",
    "ValidationException",
    "ConfigurationException",
    "AccessDeniedException",
]
