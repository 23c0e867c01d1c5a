from .access import Get, GetCached, compute, get, get_mut, get_ref, require
from .contracts import PluginFor, check_plugin_type, plugin_hosts
from .exceptions import ConfigError, HostplugError, PluginContractError, PluginUnavailableError
from .extensible import Extensible, is_extensible
from .host import ExtensibleHost
from .report import ExtensionEntryOut, ExtensionsReport, describe_extensions
from .typemap import TypeMap

__all__ = [
    "TypeMap",
    "Extensible",
    "is_extensible",
    "ExtensibleHost",
    "PluginFor",
    "plugin_hosts",
    "check_plugin_type",
    "Get",
    "GetCached",
    "get_ref",
    "get_mut",
    "get",
    "require",
    "compute",
    "ExtensionEntryOut",
    "ExtensionsReport",
    "describe_extensions",
    "HostplugError",
    "PluginContractError",
    "PluginUnavailableError",
    "ConfigError",
]
