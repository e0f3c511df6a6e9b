"""Construction-time errors raised by the encryption enforcement engine."""

from __future__ import annotations


class EnforcementError(Exception):
    """Base class for contract violations caught before a pass starts."""


class OptionsError(EnforcementError, ValueError):
    """Raised when rule options have the wrong shape or unknown keys."""


class DuplicateNodeError(EnforcementError, ValueError):
    """Raised when two children of the same node share an id."""


class TreeDefinitionError(EnforcementError, ValueError):
    """Raised when a nested tree mapping cannot be turned into nodes."""
