"""
Exception classes for choicetree.

This module defines the error kinds raised while constructing builders and
applying choices. Query operations never raise; only construction and
`choose` surface these errors to the caller.
"""

from typing import Any


class ChoiceTreeError(Exception):
    """Base exception for all choicetree errors."""

    pass


class InvalidField(ChoiceTreeError):
    """Raised when a choice targets a field that is not currently reachable."""

    def __init__(self, field: str):
        """
        Initialize the exception.

        Params:
            field: The field path that is not among the visible fields
        """
        self.field = field
        super().__init__(f'Attempted to set undefined field "{field}"')


class InvalidChoice(ChoiceTreeError):
    """Raised when a value is rejected for an otherwise reachable field."""

    def __init__(self, field: str, value: Any, reason: str | None = None):
        """
        Initialize the exception.

        Params:
            field: The field path the value was chosen for
            value: The rejected value
            reason: Human-readable reason, None when a custom predicate failed
        """
        self.field = field
        self.value = value
        self.reason = reason

        message = f"Attempted to choose [{value}] for [{field}]"
        if reason is not None:
            message = f"{message}, {reason}"
        super().__init__(message)


class SchemaDefinitionError(ChoiceTreeError):
    """Raised when a schema is missing or cannot be materialized."""

    def __init__(self, reason: str):
        """
        Initialize the exception.

        Params:
            reason: Why the schema is unusable
        """
        self.reason = reason
        super().__init__(f"Invalid schema definition: {reason}")
