"""Custom exceptions for the event editor."""


class EventEditorError(Exception):
    """Base exception for event editor errors."""


class InvalidDateInput(EventEditorError):
    """Raised when a wall-clock value, instant or timezone cannot be converted."""


class ConfigurationError(EventEditorError):
    """Raised when configuration is invalid."""
