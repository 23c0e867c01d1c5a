from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from hostplug.core.exceptions import ConfigError

CLONE_MODES = frozenset({"deep", "shallow"})

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class AccessConfig:
    """Configuration for cached and uncached plugin access.

    - check_host_type: reject hosts that are not instances of the host type a
      plugin declares through PluginFor[...].
    - clone_mode: how get() copies a cached value ("deep" or "shallow").
    """

    check_host_type: bool = True
    clone_mode: str = "deep"

    def __post_init__(self) -> None:
        if self.clone_mode not in CLONE_MODES:
            raise ConfigError(
                f"clone_mode must be one of {sorted(CLONE_MODES)}, got {self.clone_mode!r}"
            )


def _env_bool(name: str, default: bool) -> bool:
    """Read a boolean environment variable.

    Blank or unset means default; unrecognized values raise ConfigError.
    """

    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    raise ConfigError(f"{name} must be a boolean flag, got {raw!r}")


def load_access_config() -> AccessConfig:
    """Load access configuration from environment.

    Variables:
      HOSTPLUG_CHECK_HOST_TYPE, HOSTPLUG_CLONE_MODE
    """

    clone_mode = os.environ.get("HOSTPLUG_CLONE_MODE", "").strip().lower() or "deep"
    return AccessConfig(
        check_host_type=_env_bool("HOSTPLUG_CHECK_HOST_TYPE", True),
        clone_mode=clone_mode,
    )


@lru_cache(maxsize=1)
def default_access_config() -> AccessConfig:
    """Process-wide config used when an accessor is not given one.

    Loaded from environment on first use; call default_access_config.cache_clear()
    to reload.
    """

    return load_access_config()
