"""
choicetree exception classes.

This package provides all exception types raised by the engine for
consistent error handling and reporting.
"""

from choicetree.exceptions.core import (
    ChoiceTreeError,
    InvalidChoice,
    InvalidField,
    SchemaDefinitionError,
)

__all__ = [
    "ChoiceTreeError",
    "InvalidField",
    "InvalidChoice",
    "SchemaDefinitionError",
]
