from __future__ import annotations

import importlib
from typing import Any


def resolve_object(ref: str) -> Any:
    """Resolve a "package.module:attr.path" reference to the named object.

    Raises
    - ValueError: if ref is not of the form module:attr.
    - ImportError / AttributeError: if the module or attribute does not exist.
    """

    module_name, sep, attr_path = ref.partition(":")
    module_name, attr_path = module_name.strip(), attr_path.strip()
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Expected 'module:attr', got {ref!r}")

    obj: Any = importlib.import_module(module_name)
    for part in attr_path.split("."):
        obj = getattr(obj, part)
    return obj
