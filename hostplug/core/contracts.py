from __future__ import annotations

import types
import typing
from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, Tuple, TypeVar, Union

from .exceptions import PluginContractError

H = TypeVar("H")


class PluginFor(ABC, Generic[H]):
    """
    Factory contract for plugins of a host type H.

    A plugin subclasses PluginFor[Host] and implements create(), which builds
    one instance from the host or returns None when the host's current state
    does not allow it. None is a normal outcome, not an error; it is never
    cached, so a later request retries.

    Example:

        class WordCount(PluginFor[Document]):
            def __init__(self, words: int) -> None:
                self.words = words

            @classmethod
            def create(cls, host: Document) -> Optional["WordCount"]:
                return cls(len(host.text.split()))

    Classes that do not subclass PluginFor but expose a callable create()
    classmethod are accepted as well.
    """

    @classmethod
    @abstractmethod
    def create(cls, host: H) -> Optional[Any]:
        """
        Build an instance from host, or return None.
        Called at most once per host once it has succeeded.
        """
        ...


def _flatten_hosts(arg: Any) -> Tuple[type, ...]:
    origin = typing.get_origin(arg)
    if origin is Union or origin is types.UnionType:
        out: Tuple[type, ...] = ()
        for a in typing.get_args(arg):
            out += _flatten_hosts(a)
        return out
    # Subscripted generics check against their origin class.
    if origin is not None and isinstance(origin, type):
        return (origin,)
    if isinstance(arg, type):
        return (arg,)
    # TypeVar, Any, forward references: nothing checkable.
    return ()


def plugin_hosts(plugin_type: type) -> Tuple[type, ...]:
    """Return the host types a plugin declares through PluginFor[...].

    An empty tuple means the plugin accepts any host (duck-typed plugin,
    unparameterized PluginFor, or a non-class parameter such as a TypeVar).
    """

    hosts: Tuple[type, ...] = ()
    for klass in plugin_type.__mro__:
        for base in getattr(klass, "__orig_bases__", ()):
            if typing.get_origin(base) is PluginFor:
                for arg in typing.get_args(base):
                    hosts += _flatten_hosts(arg)
                return hosts
    return hosts


def check_plugin_type(plugin_type: Any) -> type:
    """Validate that plugin_type can act as a plugin and return it.

    Raises
    - PluginContractError: if plugin_type is not a class, has no callable
      create(), or is an abstract PluginFor subclass.
    """

    if not isinstance(plugin_type, type):
        raise PluginContractError(f"Plugin type must be a class, got {plugin_type!r}")

    create = getattr(plugin_type, "create", None)
    if not callable(create):
        raise PluginContractError(
            f"{plugin_type.__qualname__} does not implement create(host)"
        )

    if "create" in getattr(plugin_type, "__abstractmethods__", ()):
        raise PluginContractError(
            f"{plugin_type.__qualname__} does not implement create(host)"
        )

    return plugin_type


def check_host_for(plugin_type: type, host: Any) -> None:
    """Raise PluginContractError if host is not a declared host of plugin_type."""

    hosts = plugin_hosts(plugin_type)
    if hosts and not isinstance(host, hosts):
        names = ", ".join(h.__qualname__ for h in hosts)
        raise PluginContractError(
            f"{plugin_type.__qualname__} is a plugin for {names}, not {type(host).__qualname__}"
        )
