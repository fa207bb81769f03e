"""
Core choicetree components.

This package provides the schema tree models, literal-type markers and the
path resolution shared by the rest of the engine.
"""

from choicetree.core.path_utils import (
    PathComponents,
    PathResolver,
    join_path,
    split_path_components,
)
from choicetree.core.schema import FieldSpec, SchemaDefinition, SchemaNode
from choicetree.core.types import (
    NUMBER,
    STRING,
    ChoicePath,
    ChoiceValue,
    OptionLiteral,
)

__all__ = [
    "OptionLiteral",
    "STRING",
    "NUMBER",
    "ChoicePath",
    "ChoiceValue",
    "FieldSpec",
    "SchemaNode",
    "SchemaDefinition",
    "PathComponents",
    "PathResolver",
    "join_path",
    "split_path_components",
]
