"""
Path resolution utilities for choicetree.

A choice path is a dot-joined sequence of field names. Every segment but the
last names an enumerated field whose option has already been chosen; that
option selects the schema node in which the next segment is looked up.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from choicetree.core.schema import FieldSpec, SchemaNode
from choicetree.core.types import ChoicePath, ChoiceValue

PATH_SEPARATOR = "."


@dataclass
class PathComponents:
    """Result of splitting a path into its ancestors and target field."""

    ancestors: list[str]
    target: str

    @classmethod
    def split_path(cls, path: ChoicePath) -> "PathComponents":
        """
        Split a path at its last dot separator.

        Params:
            path: Path string to split (e.g., "class.school.spell")

        Returns:
            PathComponents with ancestor field names and the target field name

        Examples:
            "class.school.spell" -> PathComponents(["class", "school"], "spell")
            "name" -> PathComponents([], "name")
        """
        segments = split_path_components(path)
        if not segments:
            return cls(ancestors=[], target="")
        return cls(ancestors=segments[:-1], target=segments[-1])


def split_path_components(path: ChoicePath) -> list[str]:
    """
    Split a path into all its components.

    Params:
        path: Path to split (e.g., "class.spell")

    Returns:
        List of path components, empty for the root path
    """
    if not path:
        return []
    return path.split(PATH_SEPARATOR)


def join_path(breadcrumb: ChoicePath, name: str) -> ChoicePath:
    """
    Append a field name to a breadcrumb path.

    Params:
        breadcrumb: Path of the parent field, empty for the root
        name: Field name to append

    Returns:
        The full path of the field
    """
    if not breadcrumb:
        return name
    return f"{breadcrumb}{PATH_SEPARATOR}{name}"


class PathResolver:
    """
    Resolution of choice paths against a schema and the choices made so far.

    Resolution never raises: a path that cannot be followed through the
    recorded choices resolves to None, meaning "not reachable yet".
    """

    @staticmethod
    def resolve(
        path: ChoicePath,
        choices: Mapping[ChoicePath, ChoiceValue],
        schema: SchemaNode,
    ) -> FieldSpec | None:
        """
        Find the FieldSpec governing a path.

        Params:
            path: Dot-joined field path (e.g., "class.spell")
            choices: Choices recorded so far, keyed by full path
            schema: Root of the schema tree

        Returns:
            The FieldSpec of the target field, or None if any ancestor is
            unchosen or any lookup along the way fails
        """
        components = PathComponents.split_path(path)
        if not components.target:
            return None

        node = schema
        breadcrumb = ""
        for ancestor in components.ancestors:
            breadcrumb = join_path(breadcrumb, ancestor)
            node = PathResolver._descend(node, ancestor, breadcrumb, choices)
            if node is None:
                return None

        return node.fields.get(components.target)

    @staticmethod
    def resolve_fields(
        path: ChoicePath,
        choices: Mapping[ChoicePath, ChoiceValue],
        schema: SchemaNode,
    ) -> Mapping[str, FieldSpec] | None:
        """
        Find the field map governing the children of a path.

        Params:
            path: Dot-joined field path, empty for the root
            choices: Choices recorded so far, keyed by full path
            schema: Root of the schema tree

        Returns:
            The root field map for the empty path; for any other path the
            fields of the option chosen for it, or None when the path is
            unresolvable, literal-typed or not chosen yet
        """
        if not path:
            return schema.fields

        spec = PathResolver.resolve(path, choices, schema)
        if spec is None or path not in choices:
            return None

        node = spec.option_node(choices[path])
        return node.fields if node is not None else None

    @staticmethod
    def _descend(
        node: SchemaNode,
        name: str,
        path: ChoicePath,
        choices: Mapping[ChoicePath, ChoiceValue],
    ) -> SchemaNode | None:
        spec = node.fields.get(name)
        if spec is None or path not in choices:
            return None
        return spec.option_node(choices[path])
