"""Eventload exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class EventLoadError(Exception):
    """Base exception for all eventload failures."""


class EventLoadConfigError(EventLoadError):
    """Raised for invalid runtime configuration."""


class EventLoadIngestError(EventLoadError):
    """Raised for intake file reading and archiving failures."""


class EventLoadValidationError(EventLoadError):
    """Raised when a validation rule is requested for an unknown field."""


class EventLoadStoreError(EventLoadError):
    """Raised for relational store schema and insert failures."""


class EventLoadLockError(EventLoadError):
    """Raised when the run lock marker cannot be created or removed."""


class EventLoadDependencyError(EventLoadError):
    """Raised when an optional runtime dependency is missing."""
