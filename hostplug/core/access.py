from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Optional, Type, TypeVar

from hostplug.config import AccessConfig, default_access_config

from .contracts import check_host_for, check_plugin_type
from .exceptions import PluginContractError, PluginUnavailableError
from .extensible import Extensible
from .typemap import TypeMap

log = logging.getLogger("hostplug.access")

T = TypeVar("T")


def _resolve_config(host: Any, config: Optional[AccessConfig]) -> AccessConfig:
    if config is not None:
        return config
    host_config = getattr(host, "access_config", None)
    if isinstance(host_config, AccessConfig):
        return host_config
    return default_access_config()


def _validate(host: Any, plugin_type: Any, config: AccessConfig) -> type:
    plugin_type = check_plugin_type(plugin_type)
    if config.check_host_type:
        check_host_for(plugin_type, host)
    return plugin_type


def _construct(host: Any, plugin_type: Type[T]) -> Optional[T]:
    """Invoke plugin_type.create(host) and validate what it returns.

    Exceptions raised by create() propagate unchanged.
    """

    value = plugin_type.create(host)
    if value is None:
        log.debug("plugin refused: %s for %s", plugin_type.__qualname__, type(host).__qualname__)
        return None

    if not isinstance(value, plugin_type):
        raise PluginContractError(
            f"{plugin_type.__qualname__}.create returned {type(value).__qualname__}, "
            f"expected an instance of {plugin_type.__qualname__}"
        )
    return value


def _cached(
    host: Any,
    plugin_type: Any,
    config: Optional[AccessConfig],
    lookup: Callable[[TypeMap, type], Any],
) -> Any:
    """Shared lazy-get algorithm for the three cached access modes.

    1) Check the store for plugin_type.
    2) Hit: return lookup(store).
    3) Miss: create from host; on None return None without touching the store.
    4) Otherwise insert the new value and return lookup(store).
    """

    if not isinstance(host, Extensible):
        raise PluginContractError(
            f"{type(host).__qualname__} is not Extensible; use compute() for uncached access"
        )

    cfg = _resolve_config(host, config)
    plugin_type = _validate(host, plugin_type, cfg)

    if host.extensions().contains(plugin_type):
        log.debug("plugin cache hit: %s", plugin_type.__qualname__)
        return lookup(host.extensions(), plugin_type)

    log.debug("plugin cache miss: %s, creating", plugin_type.__qualname__)
    value = _construct(host, plugin_type)
    if value is None:
        return None

    store = host.extensions_mut()
    store.insert(plugin_type, value)
    log.debug("plugin stored: %s (%d cached)", plugin_type.__qualname__, len(store))
    return lookup(store, plugin_type)


def _find(store: TypeMap, plugin_type: type) -> Any:
    return store.find(plugin_type)


def _find_mut(store: TypeMap, plugin_type: type) -> Any:
    return store.find_mut(plugin_type)


def _cloner(config: AccessConfig) -> Callable[[Any], Any]:
    return copy.copy if config.clone_mode == "shallow" else copy.deepcopy


def get_ref(host: Any, plugin_type: Type[T], *, config: Optional[AccessConfig] = None) -> Optional[T]:
    """Return the cached T for host, creating and storing it on first use.

    Returns None if T.create(host) refuses; nothing is cached in that case.

    Raises
    - PluginContractError: if host is not Extensible, T is not a plugin type,
      host is not a declared host of T, or create() returns a non-T value.
    """

    return _cached(host, plugin_type, config, _find)


def get_mut(host: Any, plugin_type: Type[T], *, config: Optional[AccessConfig] = None) -> Optional[T]:
    """Return the cached T for in-place mutation, creating it on first use."""

    return _cached(host, plugin_type, config, _find_mut)


def get(host: Any, plugin_type: Type[T], *, config: Optional[AccessConfig] = None) -> Optional[T]:
    """Return a copy of the cached T, creating and storing it on first use.

    The copy is independent of the store: later mutation of the cached value or
    later insertions do not affect it. Copy depth follows config.clone_mode.
    """

    cfg = _resolve_config(host, config)
    clone = _cloner(cfg)
    return _cached(host, plugin_type, cfg, lambda store, t: clone(store.find(t)))


def require(host: Any, plugin_type: Type[T], *, config: Optional[AccessConfig] = None) -> T:
    """Like get_ref(), but raise PluginUnavailableError when T cannot be created."""

    value = get_ref(host, plugin_type, config=config)
    if value is None:
        raise PluginUnavailableError(
            f"{plugin_type.__qualname__} could not be created for {type(host).__qualname__}"
        )
    return value


def compute(host: Any, plugin_type: Type[T], *, config: Optional[AccessConfig] = None) -> Optional[T]:
    """Create a fresh T from host without any caching.

    Works for any host, extensible or not; the factory runs on every call.
    """

    cfg = _resolve_config(host, config)
    plugin_type = _validate(host, plugin_type, cfg)
    return _construct(host, plugin_type)


class Get:
    """Mixin granting uncached plugin construction to any class."""

    def compute(self, plugin_type: Type[T], *, config: Optional[AccessConfig] = None) -> Optional[T]:
        return compute(self, plugin_type, config=config)


class GetCached:
    """Mixin granting cached plugin access to an Extensible class.

    The class must implement extensions() and extensions_mut().
    """

    def get_ref(self, plugin_type: Type[T], *, config: Optional[AccessConfig] = None) -> Optional[T]:
        return get_ref(self, plugin_type, config=config)

    def get_mut(self, plugin_type: Type[T], *, config: Optional[AccessConfig] = None) -> Optional[T]:
        return get_mut(self, plugin_type, config=config)

    def get(self, plugin_type: Type[T], *, config: Optional[AccessConfig] = None) -> Optional[T]:
        return get(self, plugin_type, config=config)

    def require(self, plugin_type: Type[T], *, config: Optional[AccessConfig] = None) -> T:
        return require(self, plugin_type, config=config)
