from __future__ import annotations

from typing import ClassVar, Optional

from hostplug.config import AccessConfig

from .access import Get, GetCached
from .typemap import TypeMap


class ExtensibleHost(GetCached, Get):
    """Base class for hosts that cache their plugins.

    Owns one TypeMap, created empty with the host. Subclasses call
    super().__init__() and add their own state; plugins then read that state
    from create().

    Set access_config on a subclass to override the process-wide config for
    all of its instances.
    """

    access_config: ClassVar[Optional[AccessConfig]] = None

    def __init__(self) -> None:
        self._extensions = TypeMap()

    def extensions(self) -> TypeMap:
        return self._extensions

    def extensions_mut(self) -> TypeMap:
        return self._extensions
