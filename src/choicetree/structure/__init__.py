"""
choicetree structure components.

This package provides the choice record and the validation and enumeration
queries evaluated over a schema and its choices.
"""

from choicetree.structure.choices import ChoiceSet
from choicetree.structure.enumeration import (
    enumerate_fields,
    missing_fields,
    option_names,
    required_fields,
)
from choicetree.structure.validation import validate_choice

__all__ = [
    "ChoiceSet",
    "enumerate_fields",
    "missing_fields",
    "option_names",
    "required_fields",
    "validate_choice",
]
