from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Iterator, Optional

from .errors import MethodNotFoundError


def mangled_name(owner: type, name: str) -> str:
    if not name.startswith("__") or name.endswith("__"):
        return name
    stripped = owner.__name__.lstrip("_")
    if not stripped:
        return name
    return f"_{stripped}{name}"


class MethodInvoker:
    """Calls a zero-argument method located by name alone.

    Members declared on the concrete class are searched first, private
    (``__name``) ones included, then the public MRO. A class can hold only
    one member per name, so the first zero-argument match is unambiguous.
    """

    def invoke(self, instance: Any, method_name: str) -> Any:
        method = self.find(instance, method_name)
        if method is None:
            raise MethodNotFoundError(type(instance).__name__, method_name)
        return method()

    def find(self, instance: Any, method_name: str) -> Optional[Callable[[], Any]]:
        owner = type(instance)
        for member in self._declared(owner, method_name):
            bound = _bind_zero_arg(member, instance, owner)
            if bound is not None:
                return bound
        for member in self._inherited(owner, method_name):
            bound = _bind_zero_arg(member, instance, owner)
            if bound is not None:
                return bound
        return None

    def _declared(self, owner: type, method_name: str) -> Iterator[Any]:
        namespace = vars(owner)
        for name in dict.fromkeys((method_name, mangled_name(owner, method_name))):
            if name in namespace:
                yield namespace[name]

    def _inherited(self, owner: type, method_name: str) -> Iterator[Any]:
        for klass in owner.__mro__:
            namespace = vars(klass)
            if method_name in namespace:
                yield namespace[method_name]


def _bind_zero_arg(member: Any, instance: Any, owner: type) -> Optional[Callable[[], Any]]:
    if inspect.isclass(member) or isinstance(member, (property, functools.cached_property)):
        return None
    if inspect.isroutine(member):
        bound = member.__get__(instance, owner)
    elif callable(member):
        bound = member
    else:
        return None
    try:
        signature = inspect.signature(bound)
    except (TypeError, ValueError):
        # Some builtins expose no signature; let the call itself decide.
        return bound
    try:
        signature.bind()
    except TypeError:
        return None
    return bound
