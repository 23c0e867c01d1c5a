from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .typemap import TypeMap


@runtime_checkable
class Extensible(Protocol):
    """
    Protocol for hosts that own extension storage.

    An extensible host owns exactly one TypeMap for its whole lifetime and
    exposes it through two accessors: extensions() for lookups and
    extensions_mut() for insertion. Any object with both methods gets cached
    plugin access.
    """

    def extensions(self) -> TypeMap:
        """
        Return the host's extension storage for reading.
        """
        ...

    def extensions_mut(self) -> TypeMap:
        """
        Return the host's extension storage for insertion.
        """
        ...


def is_extensible(obj: Any) -> bool:
    """Return True if obj satisfies the Extensible protocol."""
    return isinstance(obj, Extensible)
