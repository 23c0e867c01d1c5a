from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, Field

from .exceptions import PluginContractError
from .extensible import Extensible

_MAX_REPR = 200


class ExtensionEntryOut(BaseModel):
    """One cached plugin on a host."""

    type_name: str
    module: str
    value_repr: str


class ExtensionsReport(BaseModel):
    """Diagnostic summary of a host's extension storage."""

    host_type: str
    count: int
    entries: List[ExtensionEntryOut] = Field(default_factory=list)


def _bounded_repr(value: Any) -> str:
    text = repr(value)
    if len(text) > _MAX_REPR:
        return text[: _MAX_REPR - 3] + "..."
    return text


def describe_extensions(host: Any) -> ExtensionsReport:
    """Summarize which plugin types are currently cached on host.

    Read-only: never creates plugins.

    Raises
    - PluginContractError: if host is not Extensible.
    """

    if not isinstance(host, Extensible):
        raise PluginContractError(f"{type(host).__qualname__} is not Extensible")

    store = host.extensions()
    entries = [
        ExtensionEntryOut(
            type_name=t.__qualname__,
            module=t.__module__,
            value_repr=_bounded_repr(store.find(t)),
        )
        for t in store.types()
    ]
    return ExtensionsReport(
        host_type=f"{type(host).__module__}.{type(host).__qualname__}",
        count=len(entries),
        entries=entries,
    )
