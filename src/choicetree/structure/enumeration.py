"""
Queries over a schema and the choices made so far.

These functions compute which fields are currently visible, which of them
still lack a value, which root fields are required, and the option space of
a field. They are pure and never raise for unresolvable paths.
"""

from collections.abc import Mapping

from choicetree.core.path_utils import PathResolver, join_path
from choicetree.core.schema import SchemaNode
from choicetree.core.types import ChoicePath, ChoiceValue, OptionLiteral


def enumerate_fields(
    choices: Mapping[ChoicePath, ChoiceValue], schema: SchemaNode
) -> list[ChoicePath]:
    """
    List the paths of all fields that can currently be set.

    Walks the schema depth-first in declaration order. A literal field, or an
    enumerated field without a choice, is listed as is; an enumerated field
    with a choice is replaced by the fields of the chosen option.

    Params:
        choices: Choices recorded so far, keyed by full path
        schema: Root of the schema tree

    Returns:
        Visible field paths, in schema order
    """
    visible: list[ChoicePath] = []
    _collect_fields(schema, "", choices, visible)
    return visible


def _collect_fields(
    node: SchemaNode,
    breadcrumb: ChoicePath,
    choices: Mapping[ChoicePath, ChoiceValue],
    visible: list[ChoicePath],
) -> None:
    for name, spec in node.fields.items():
        path = join_path(breadcrumb, name)
        if spec.is_literal or path not in choices:
            visible.append(path)
            continue

        chosen = spec.option_node(choices[path])
        if chosen is not None:
            _collect_fields(chosen, path, choices, visible)


def missing_fields(
    choices: Mapping[ChoicePath, ChoiceValue], schema: SchemaNode
) -> list[ChoicePath]:
    """
    List reachable fields that have no value yet.

    Every unset field on the active path is reported whether or not it is
    marked required; `required_fields` is the only query that looks at the
    required flag.

    Params:
        choices: Choices recorded so far, keyed by full path
        schema: Root of the schema tree

    Returns:
        Unset field paths; the unset fields of a level come before those
        found below the options chosen on that level
    """
    return _collect_missing([""], choices, schema)


def _collect_missing(
    pending: list[ChoicePath],
    choices: Mapping[ChoicePath, ChoiceValue],
    schema: SchemaNode,
) -> list[ChoicePath]:
    missing: list[ChoicePath] = []
    for choice_path in pending:
        fields = PathResolver.resolve_fields(choice_path, choices, schema) or {}

        paths = [(join_path(choice_path, name), spec) for name, spec in fields.items()]
        unset = [path for path, _ in paths if path not in choices]
        # chosen enumerated fields have fields of their own below them
        explore = [
            path for path, spec in paths if path in choices and not spec.is_literal
        ]

        missing.extend(unset)
        missing.extend(_collect_missing(explore, choices, schema))
    return missing


def required_fields(schema: SchemaNode) -> list[str]:
    """
    List the root-level fields flagged as required.

    Only the root level is inspected; required fields inside options are not
    reported.

    Params:
        schema: Root of the schema tree

    Returns:
        Names of required root fields, in schema order
    """
    return [name for name, spec in schema.fields.items() if spec.required]


def option_names(
    path: ChoicePath,
    choices: Mapping[ChoicePath, ChoiceValue],
    schema: SchemaNode,
) -> OptionLiteral | list[str] | None:
    """
    Describe the values that can be chosen for a field.

    Params:
        path: Dot-joined field path
        choices: Choices recorded so far, keyed by full path
        schema: Root of the schema tree

    Returns:
        The literal-type marker for literal fields, the option names in
        declaration order for enumerated fields, or None if the path does not
        resolve
    """
    spec = PathResolver.resolve(path, choices, schema)
    if spec is None:
        return None
    if spec.is_literal:
        return spec.options
    return spec.option_names()
