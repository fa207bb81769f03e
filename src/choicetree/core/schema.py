"""
Schema tree models for choicetree.

A schema is a tree of `SchemaNode`s. Each node maps field names to a
`FieldSpec`; a field either takes a primitive value (its options are an
`OptionLiteral` marker) or branches into one nested `SchemaNode` per option
name. Field and option order follow declaration order and are significant.
"""

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from choicetree.core.types import OptionLiteral
from choicetree.exceptions import SchemaDefinitionError


class FieldSpec(BaseModel):
    """
    Specification of a single field.

    Params:
        options: Literal-type marker, or mapping from option name to the
            nested node unlocked by choosing that option
        required: Whether the field is reported by `Builder.requires`
        validation: Optional predicate every chosen value must satisfy
    """

    model_config = ConfigDict(frozen=True)

    options: OptionLiteral | Mapping[str, "SchemaNode"]
    required: bool = False
    validation: Callable[[Any], bool] | None = None

    @field_validator("options")
    @classmethod
    def _freeze_options(cls, options):
        if isinstance(options, OptionLiteral):
            return options
        return _read_only(options)

    @property
    def is_literal(self) -> bool:
        """Check if this field takes a primitive value rather than an option name."""
        return isinstance(self.options, OptionLiteral)

    def option_names(self) -> list[str]:
        """
        List the option names of an enumerated field in declaration order.

        Returns:
            Option names, or an empty list for literal-typed fields
        """
        if self.is_literal:
            return []
        return list(self.options)

    def option_node(self, option: Any) -> "SchemaNode | None":
        """
        Get the node unlocked by an option of an enumerated field.

        Params:
            option: Option name previously chosen for this field

        Returns:
            The nested SchemaNode, or None if the field is literal or the
            option is unknown
        """
        if self.is_literal or not isinstance(option, str):
            return None
        return self.options.get(option)


class SchemaNode(BaseModel):
    """A level of the schema tree: an ordered mapping of field names to specs."""

    model_config = ConfigDict(frozen=True)

    fields: Mapping[str, FieldSpec] = Field(default_factory=dict, validate_default=True)

    @field_validator("fields")
    @classmethod
    def _freeze_fields(cls, fields):
        return _read_only(fields)


def _read_only(values: Mapping) -> Mapping:
    # schema maps are never modified after validation
    return MappingProxyType(dict(values))


FieldSpec.model_rebuild()
SchemaNode.model_rebuild()


class SchemaDefinition(SchemaNode):
    """The root node of a schema, supplied once and never modified."""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SchemaDefinition":
        """
        Materialize a schema from a nested mapping.

        Literal markers may be given as `OptionLiteral` members or by their
        values ("string", "number"); options without further fields may be
        given as empty mappings.

        Params:
            data: Mapping shaped like `{"fields": {name: {"options": ...}}}`

        Returns:
            Validated SchemaDefinition

        Raises:
            SchemaDefinitionError: If the mapping does not describe a schema
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise SchemaDefinitionError(str(e)) from e

