"""
Immutable record of the choices made for one builder.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from attrs import field, frozen

from choicetree.core.types import ChoicePath, ChoiceValue


def _freeze(values: Mapping[ChoicePath, ChoiceValue]) -> Mapping:
    return MappingProxyType(dict(values))


@frozen
class ChoiceSet(Mapping):
    """Insertion-ordered, read-only mapping from choice path to chosen value.

    Every update returns a new ChoiceSet; existing instances are never
    modified, so builders sharing one can be branched freely.
    """

    _values: Mapping[ChoicePath, ChoiceValue] = field(factory=dict, converter=_freeze)

    @classmethod
    def empty(cls) -> "ChoiceSet":
        return cls()

    def with_choice(self, path: ChoicePath, value: ChoiceValue) -> "ChoiceSet":
        """Return a copy with `path` set to `value`.

        An overwritten path keeps its original position.
        """
        updated = dict(self._values)
        updated[path] = value
        return ChoiceSet(updated)

    def __getitem__(self, path: ChoicePath) -> ChoiceValue:
        return self._values[path]

    def __iter__(self) -> Iterator[ChoicePath]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return dict(self._values) == dict(other)

    def __hash__(self) -> int:
        return hash(frozenset(self._values.items()))

    def __repr__(self) -> str:
        return f"ChoiceSet({dict(self._values)!r})"
