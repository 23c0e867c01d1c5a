from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List

from hostplug import __version__
from hostplug.config import AccessConfig, load_access_config
from hostplug.core import (
    PluginContractError,
    compute,
    describe_extensions,
    get_ref,
    is_extensible,
)
from hostplug.core.exceptions import HostplugError
from hostplug.utils.importing import resolve_object

log = logging.getLogger("hostplug.cli")


def _error(message: str) -> int:
    print(f"error: {message}", file=sys.stderr)
    return 2


def _host_config(host: Any, env_config: AccessConfig) -> AccessConfig:
    # Same precedence as the library: a host class override beats the environment.
    host_config = getattr(host, "access_config", None)
    if isinstance(host_config, AccessConfig):
        return host_config
    return env_config


def cmd_version(_: argparse.Namespace) -> int:
    print(__version__)
    return 0


def cmd_inspect(args: argparse.Namespace) -> int:
    """Build a host, request plugins in the given order, print the outcome as JSON.

    Exit codes: 0 all plugins produced, 1 some refused, 2 usage/import/contract error.
    """

    try:
        env_config = load_access_config()
    except HostplugError as exc:
        return _error(str(exc))

    try:
        factory = resolve_object(args.host)
    except (ValueError, ImportError, AttributeError) as exc:
        return _error(f"cannot resolve host {args.host!r}: {exc}")
    if not callable(factory):
        return _error(f"host {args.host!r} is not callable")

    try:
        host = factory()
    except Exception as exc:
        return _error(f"host factory {args.host!r} failed: {exc}")
    log.debug("built host %s from %s", type(host).__qualname__, args.host)

    if not args.compute and not is_extensible(host):
        return _error(
            f"{type(host).__qualname__} is not Extensible; pass --compute for uncached access"
        )

    config = _host_config(host, env_config)

    results: List[Dict[str, Any]] = []
    for ref in args.plugin:
        try:
            plugin_type = resolve_object(ref)
        except (ValueError, ImportError, AttributeError) as exc:
            return _error(f"cannot resolve plugin {ref!r}: {exc}")

        try:
            if args.compute:
                value = compute(host, plugin_type, config=config)
            else:
                value = get_ref(host, plugin_type, config=config)
        except PluginContractError as exc:
            return _error(str(exc))
        except Exception as exc:
            return _error(f"plugin {ref!r} failed: {exc}")

        results.append(
            {
                "plugin": ref,
                "produced": value is not None,
                "value_repr": None if value is None else repr(value),
            }
        )

    output: Dict[str, Any] = {
        "host": f"{type(host).__module__}.{type(host).__qualname__}",
        "mode": "uncached" if args.compute else "cached",
        "plugins": results,
        "extensions": describe_extensions(host).model_dump() if is_extensible(host) else None,
    }
    print(json.dumps(output, indent=2, sort_keys=True))

    return 0 if all(r["produced"] for r in results) else 1


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="hostplug", description="Lazy per-type plugins for extensible hosts")
    p.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Enable logging to stderr at this level",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    ip = sub.add_parser("inspect", help="Build a host and request plugins from it")
    ip.add_argument("--host", required=True, help="Host factory as module:attr (called with no arguments)")
    ip.add_argument(
        "--plugin",
        action="append",
        default=[],
        help="Plugin type as module:attr (repeatable, requested in order)",
    )
    ip.add_argument("--compute", action="store_true", help="Use uncached access (compute) instead of get_ref")
    ip.set_defaults(func=cmd_inspect)

    vp = sub.add_parser("version", help="Print the hostplug version")
    vp.set_defaults(func=cmd_version)

    return p


def main(argv: List[str] | None = None) -> int:
    """CLI entry."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.log_level:
        logging.basicConfig(level=getattr(logging, args.log_level), stream=sys.stderr)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
