from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, Tuple, Type, TypeVar

T = TypeVar("T")


def _require_type(key: Any) -> type:
    if not isinstance(key, type):
        raise TypeError(f"TypeMap keys must be classes, got {key!r}")
    return key


@dataclass
class TypeMap:
    """Heterogeneous container holding at most one value per type.

    Values are addressed by the class object they were inserted under. Storage
    is a plain dict, so capacity grows as more distinct types are added.

    Invariants
    - At most one live value per key type.
    - A stored value is always an instance of its key type.
    - Absence is reported as None, never raised (except by __getitem__).

    - contains / find / insert / remove: O(1) average
    - types: O(n)
    """

    _values: Dict[type, Any] = field(default_factory=dict, init=False, repr=False)

    def contains(self, key: Type[T]) -> bool:
        """Return True if a value is stored under key."""
        return _require_type(key) in self._values

    def find(self, key: Type[T]) -> Optional[T]:
        """Return the value stored under key, or None."""
        return self._values.get(_require_type(key))

    def find_mut(self, key: Type[T]) -> Optional[T]:
        """Return the value stored under key for in-place mutation, or None.

        The stored object itself is returned, exactly as with find(); callers
        use this entry point when they intend to mutate it.
        """
        return self.find(key)

    def insert(self, key: Type[T], value: T) -> Optional[T]:
        """Store value under key and return the value it replaced, if any.

        Raises
        - TypeError: if key is not a class or value is not an instance of key.
        """
        key = _require_type(key)
        if not isinstance(value, key):
            raise TypeError(
                f"Value of type {type(value).__qualname__} cannot be stored under {key.__qualname__}"
            )
        previous = self._values.get(key)
        self._values[key] = value
        return previous

    def remove(self, key: Type[T]) -> Optional[T]:
        """Remove and return the value stored under key, or None."""
        return self._values.pop(_require_type(key), None)

    def clear(self) -> None:
        self._values.clear()

    def is_empty(self) -> bool:
        return not self._values

    def types(self) -> Tuple[type, ...]:
        """Return the stored key types."""
        return tuple(self._values)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, type) and key in self._values

    def __getitem__(self, key: Type[T]) -> T:
        return self._values[_require_type(key)]

    def __iter__(self) -> Iterator[type]:
        return iter(tuple(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        names = ", ".join(t.__qualname__ for t in self._values)
        return f"TypeMap([{names}])"
