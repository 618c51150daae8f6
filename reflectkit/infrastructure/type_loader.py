from __future__ import annotations

import importlib
import inspect

from ..domain.errors import TypeLoadError


def load_type(qualified_name: str) -> type:
    """Import ``package.module:Qualname`` (or ``package.module.Qualname``).

    Importing runs the module body, so the class is fully initialized when
    returned.
    """
    module_name, attr_path = _split(qualified_name)
    try:
        target = importlib.import_module(module_name)
    except ImportError as exc:
        raise TypeLoadError(f"Cannot import module {module_name!r} for {qualified_name!r}") from exc
    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise TypeLoadError(f"{module_name!r} has no attribute path {attr_path!r}") from exc
    if not inspect.isclass(target):
        raise TypeLoadError(f"{qualified_name!r} is not a class")
    return target


def _split(qualified_name: str) -> tuple[str, str]:
    if ":" in qualified_name:
        module_name, _, attr_path = qualified_name.partition(":")
    else:
        module_name, _, attr_path = qualified_name.rpartition(".")
    if not module_name or not attr_path:
        raise TypeLoadError(f"Expected 'module:Type' or 'module.Type', got {qualified_name!r}")
    return module_name, attr_path
