"""Lazily-evaluated, order-independent plugins for extensible hosts.

A host owns a TypeMap; plugin types implement PluginFor[Host].create(); the
host then builds each plugin on first request and caches it per type.
"""

from hostplug.core import (
    ConfigError,
    Extensible,
    ExtensibleHost,
    ExtensionsReport,
    Get,
    GetCached,
    HostplugError,
    PluginContractError,
    PluginFor,
    PluginUnavailableError,
    TypeMap,
    compute,
    describe_extensions,
    get,
    get_mut,
    get_ref,
    require,
)
from hostplug.config import AccessConfig, default_access_config, load_access_config

__version__ = "0.1.0"

__all__ = [
    "AccessConfig",
    "load_access_config",
    "default_access_config",
    "TypeMap",
    "Extensible",
    "ExtensibleHost",
    "PluginFor",
    "Get",
    "GetCached",
    "get_ref",
    "get_mut",
    "get",
    "require",
    "compute",
    "ExtensionsReport",
    "describe_extensions",
    "HostplugError",
    "PluginContractError",
    "PluginUnavailableError",
    "ConfigError",
]
