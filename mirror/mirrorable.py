from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import Any


HASH_SEED = 17
HASH_MULTIPLIER = 37


def find_duplicates(values: Iterable[Any]) -> list[Any]:
    """Values that appear more than once, compared with `==`. Values need not
    be hashable, so this is quadratic; `props` lists are short."""
    seen: list[Any] = []
    duplicates: list[Any] = []
    for item in values:
        if any(item == s for s in seen):
            duplicates.append(item)
        else:
            seen.append(item)
    return duplicates


def validate(owner: str, props: Sequence[Any]) -> None:
    assert len(props) > 0, \
        f"{owner}: props cannot be empty. You must override the `props` property."
    duplicates = find_duplicates(props)
    assert not duplicates, \
        f"{owner}: props contains duplicate fields: {duplicates}"


class Mirrorable(ABC):
    """Base class deriving `==`, `hash()` and `str()` from the values listed
    in `props`.

    ```python
    class Person(Mirrorable):
        def __init__(self, id: int, name: str):
            self.id = id
            self.name = name

        @property
        def props(self):
            return [self.id, self.name]

    Person(1, "Alice") == Person(1, "Alice")   # True
    str(Person(1, "Alice"))                    # "Person(1, Alice)"
    ```

    Only instances of the exact same class can be equal. An empty `props`,
    or one listing the same value twice, is a programming error and fails an
    assertion on every comparison, hash or rendering (unless Python runs
    with `-O`).

    When combining this with `@dataclass`, pass `eq=False` so the dataclass
    keeps these methods.
    """

    @property
    @abstractmethod
    def props(self) -> Sequence[Any]:
        ...

    def _validated_props(self) -> Sequence[Any]:
        props = self.props
        if __debug__:
            validate(type(self).__name__, props)
        return props

    def __eq__(self, other: object) -> bool:
        props = self._validated_props()
        if other is self:
            return True
        if not isinstance(other, Mirrorable):
            return NotImplemented
        if type(other) is not type(self):
            return False
        other_props = other.props
        if len(props) != len(other_props):
            return False
        return all(a == b for a, b in zip(props, other_props))

    def __hash__(self) -> int:
        result = HASH_SEED
        for prop in self._validated_props():
            result = HASH_MULTIPLIER * result + (0 if prop is None else hash(prop))
        return result

    def __str__(self) -> str:
        props = self._validated_props()
        return f"{type(self).__name__}({', '.join(str(p) for p in props)})"

    def __repr__(self) -> str:
        return str(self)
