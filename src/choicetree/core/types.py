"""
Core type definitions for choicetree.

This module contains the literal-type markers and the type aliases shared
across the engine.
"""

from enum import Enum
from typing import Any

ChoicePath = str

ChoiceValue = str | int | float


class OptionLiteral(Enum):
    """Markers for fields that take a primitive value instead of an option name.

    Members are never equal to ordinary strings or numbers, so a marker
    returned by `Builder.options` can always be told apart from option names.
    """

    STRING = "string"
    NUMBER = "number"

    def accepts(self, value: Any) -> bool:
        """Check whether a value has the primitive type this marker denotes.

        Params:
            value: Candidate value

        Returns:
            True if the runtime type matches the marker
        """
        if self is OptionLiteral.STRING:
            return isinstance(value, str)
        # bool is an int subclass but not a number here
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    def __repr__(self) -> str:
        return f"OptionLiteral.{self.name}"


STRING = OptionLiteral.STRING
NUMBER = OptionLiteral.NUMBER
