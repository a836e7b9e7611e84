"""
Optional base class for search states.

Any hashable value with consistent equality can be used as a state
(tuples, frozen dataclasses, namedtuples). For plain classes, subclass
State to derive equality and hashing from the instance attributes:

    class GridState(State):
        def __init__(self, x, y):
            self.x = x
            self.y = y

    GridState(1, 2) == GridState(1, 2)      # True
    hash(GridState(1, 2)) == hash(GridState(1, 2))

Attribute values are frozen recursively (lists/tuples -> tuples,
sets -> frozensets, dicts -> frozensets of items), so two states with
identical internal structure compare equal and hash identically.
Subclasses may override __eq__ and __hash__ with a faster version.
"""

from typing import Any, Dict, Tuple


def _freeze(value: Any) -> Any:
    """Convert a value into a hashable structural equivalent."""
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_freeze(v) for v in value)
    if isinstance(value, dict):
        return frozenset((_freeze(k), _freeze(v)) for k, v in value.items())
    return value


class State:
    """Structural equality and hashing based on instance attributes."""

    __slots__ = ()

    def _fields(self) -> Dict[str, Any]:
        fields = dict(getattr(self, "__dict__", {}))
        for cls in type(self).__mro__:
            for name in getattr(cls, "__slots__", ()):
                if name not in fields and hasattr(self, name):
                    fields[name] = getattr(self, name)
        return fields

    def state_key(self) -> Tuple[Tuple[str, Any], ...]:
        """Frozen, ordered view of the attributes used for eq/hash."""
        return tuple(sorted(
            ((name, _freeze(value)) for name, value in self._fields().items()),
            key=lambda item: item[0],
        ))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return self.state_key() == other.state_key()

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        try:
            return hash((type(self).__qualname__, self.state_key()))
        except TypeError as e:
            raise TypeError(
                f"{type(self).__name__} is not hashable (make sure its attributes are hashable): {e}"
            ) from e

    def __repr__(self) -> str:
        body = ", ".join(f"{k}={v!r}" for k, v in self._fields().items())
        return f"{type(self).__name__}({body})"


__all__ = ['State']
