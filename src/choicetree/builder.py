"""
Builder façade for guided configuration.

A `Builder` pairs a schema with the choices made so far. It answers which
fields are visible, which are still missing and which options a field
offers, and produces a new builder for every accepted choice. Builders are
immutable: branching several choices off the same builder yields independent
results.

Example:
    Character = builder_for(schema)
    hero = Character({"name": "Ragnar"}).choose("class", "mage")
    hero.missing()  # -> ["class.spell"]
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar

from choicetree.core.schema import SchemaDefinition, SchemaNode
from choicetree.core.types import ChoicePath, ChoiceValue, OptionLiteral
from choicetree.exceptions import SchemaDefinitionError
from choicetree.structure.choices import ChoiceSet
from choicetree.structure.enumeration import (
    enumerate_fields,
    missing_fields,
    option_names,
    required_fields,
)
from choicetree.structure.validation import validate_choice

logger = logging.getLogger(__name__)

InitialValues = Mapping[ChoicePath, Any] | Iterable[tuple[ChoicePath, Any]]


class Builder:
    """
    Immutable pairing of a schema and a set of validated choices.

    Initial values are applied in the order given, each one validated against
    the choices applied before it, so an ancestor choice must come before the
    choices of the fields it unlocks.

    Params:
        values: Ordered mapping or iterable of (path, value) pairs
        schema: Schema to build against; defaults to the class-level `schema`
            set by `builder_for`. Plain mappings are materialized with
            `SchemaDefinition.from_dict`.

    Raises:
        InvalidField: If a path is not visible when its value is applied
        InvalidChoice: If a value is rejected for its field
        SchemaDefinitionError: If no usable schema is available
    """

    schema: ClassVar[SchemaNode | None] = None

    def __init__(
        self,
        values: InitialValues | None = None,
        schema: SchemaNode | Mapping[str, Any] | None = None,
    ):
        self._schema = _materialize(schema if schema is not None else type(self).schema)

        choices = ChoiceSet.empty()
        for path, value in _ordered_items(values):
            validate_choice(path, value, choices, self._schema)
            choices = choices.with_choice(path, value)
            logger.debug("Applied choice %r = %r", path, value)
        self._choices = choices

    @classmethod
    def create_from(cls, origin: "Builder", values: InitialValues) -> "Builder":
        """
        Build a fresh builder of this class on the schema of an existing one.

        Params:
            origin: Builder whose schema is reused
            values: Initial values for the new builder

        Returns:
            New builder holding only `values`
        """
        return cls(values, schema=origin._schema)

    @property
    def choices(self) -> ChoiceSet:
        """The validated choices held by this builder."""
        return self._choices

    @property
    def definition(self) -> SchemaNode:
        """The schema this builder validates against."""
        return self._schema

    def choose(self, path: ChoicePath, value: Any) -> "Builder":
        """
        Record a choice, returning a new builder.

        All choices are replayed with the new value merged in, so changing an
        enumerated field to an option that no longer offers an already chosen
        descendant fails with InvalidField for that descendant.

        Params:
            path: Dot-joined field path
            value: Literal value or option name to choose

        Returns:
            New builder including the choice; this builder is unchanged

        Raises:
            InvalidField: If the path, or a replayed descendant, is not visible
            InvalidChoice: If the value is rejected for the field
        """
        merged = self._choices.with_choice(path, value)
        logger.debug("Replaying %d choices after choosing %r", len(merged), path)
        return type(self)(merged, schema=self._schema)

    def get(self, path: ChoicePath) -> ChoiceValue | None:
        """Get the value chosen for a path, or None if none was chosen."""
        return self._choices.get(path)

    def fields(self) -> list[ChoicePath]:
        """List the paths of all fields that can currently be set."""
        return enumerate_fields(self._choices, self._schema)

    def missing(self) -> list[ChoicePath]:
        """List visible fields without a value, regardless of the required flag."""
        return missing_fields(self._choices, self._schema)

    def requires(self) -> list[str]:
        """List the root-level fields marked as required."""
        return required_fields(self._schema)

    def options(self, path: ChoicePath) -> OptionLiteral | list[str] | None:
        """
        Describe what can be passed to `choose` for a field.

        Params:
            path: Dot-joined field path

        Returns:
            The literal-type marker (STRING, NUMBER) for literal fields, the
            option names for enumerated fields, or None for unresolvable paths
        """
        return option_names(path, self._choices, self._schema)

    def is_complete(self) -> bool:
        """Check that no visible field is missing a value."""
        return not self.missing()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Builder):
            return NotImplemented
        return self._schema == other._schema and self._choices == other._choices

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._choices)!r})"


def builder_for(
    schema: SchemaNode | Mapping[str, Any], name: str = "GeneratedBuilder"
) -> type[Builder]:
    """
    Create a Builder subclass bound to a schema.

    Params:
        schema: Schema the generated class builds against
        name: Name of the generated class

    Returns:
        Builder subclass whose instances need only initial values

    Raises:
        SchemaDefinitionError: If the schema cannot be materialized
    """
    return type(name, (Builder,), {"schema": _materialize(schema)})


def _materialize(schema: SchemaNode | Mapping[str, Any] | None) -> SchemaNode:
    if schema is None:
        raise SchemaDefinitionError("no schema given and none bound to the builder")
    if isinstance(schema, SchemaNode):
        return schema
    if isinstance(schema, Mapping):
        return SchemaDefinition.from_dict(schema)
    raise SchemaDefinitionError(
        f"expected a SchemaNode or mapping, got {type(schema).__name__}"
    )


def _ordered_items(values: InitialValues | None) -> Iterable[tuple[ChoicePath, Any]]:
    if values is None:
        return ()
    if isinstance(values, Mapping):
        return values.items()
    return values
