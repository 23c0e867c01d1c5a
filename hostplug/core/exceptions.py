class HostplugError(Exception):
    """
    Base exception for all hostplug failures.
    """

    pass


class PluginContractError(HostplugError, TypeError):
    """
    Raised when a plugin type or host does not satisfy its capability contract.
    """

    pass


class PluginUnavailableError(HostplugError, LookupError):
    """
    Raised when a required plugin could not be constructed from its host.
    """

    pass


class ConfigError(HostplugError, ValueError):
    """
    Raised when access configuration is invalid.
    """

    pass
