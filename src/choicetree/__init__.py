"""
choicetree - Guided configuration over tree-shaped schemas

choicetree resolves which fields of a schema are reachable given the choices
made so far, validates every new choice, and reports what is still missing.
"""

from importlib.metadata import version

from choicetree.builder import Builder, builder_for
from choicetree.core import (
    NUMBER,
    STRING,
    FieldSpec,
    OptionLiteral,
    SchemaDefinition,
    SchemaNode,
)
from choicetree.exceptions import (
    ChoiceTreeError,
    InvalidChoice,
    InvalidField,
    SchemaDefinitionError,
)
from choicetree.structure import ChoiceSet

__version__ = version("choicetree")

__all__ = [
    "__version__",
    "Builder",
    "builder_for",
    "ChoiceSet",
    "FieldSpec",
    "SchemaNode",
    "SchemaDefinition",
    "OptionLiteral",
    "STRING",
    "NUMBER",
    "ChoiceTreeError",
    "InvalidField",
    "InvalidChoice",
    "SchemaDefinitionError",
]
