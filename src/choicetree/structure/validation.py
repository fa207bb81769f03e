"""
Validation of a single choice against the schema.

A choice is accepted only when its path is currently visible and its value
fits the field's option space and custom predicate. Validation is pure; the
caller records the value once it has been accepted.
"""

import logging
from collections.abc import Mapping
from typing import Any

from choicetree.core.path_utils import PathResolver
from choicetree.core.schema import SchemaNode
from choicetree.core.types import ChoicePath, ChoiceValue, OptionLiteral
from choicetree.exceptions import InvalidChoice, InvalidField
from choicetree.structure.enumeration import enumerate_fields

logger = logging.getLogger(__name__)


def validate_choice(
    path: ChoicePath,
    value: Any,
    choices: Mapping[ChoicePath, ChoiceValue],
    schema: SchemaNode,
) -> None:
    """
    Check a proposed value for a field against the current choices.

    Checks run in order: the path must be visible, the value must match the
    literal type or be one of the option names, and the field's validation
    predicate, if any, must accept it. Exceptions raised by the predicate
    itself propagate unchanged.

    Params:
        path: Dot-joined field path the value is chosen for
        value: Proposed value
        choices: Choices recorded so far, keyed by full path
        schema: Root of the schema tree

    Raises:
        InvalidField: If the path is not among the visible fields
        InvalidChoice: If the value is rejected for the field
    """
    if path not in enumerate_fields(choices, schema):
        logger.debug("Rejected choice for unreachable field %r", path)
        raise InvalidField(path)

    spec = PathResolver.resolve(path, choices, schema)
    if spec is None:
        raise InvalidField(path)

    if isinstance(spec.options, OptionLiteral):
        if not spec.options.accepts(value):
            raise InvalidChoice(path, value, f"must be {spec.options.value}")
    else:
        names = spec.option_names()
        if not isinstance(value, str) or value not in names:
            raise InvalidChoice(path, value, f"must be one of [{', '.join(names)}]")

    if spec.validation is not None and not spec.validation(value):
        logger.debug("Validation predicate rejected %r for %r", value, path)
        raise InvalidChoice(path, value)
