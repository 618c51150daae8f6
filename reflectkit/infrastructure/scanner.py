from __future__ import annotations

import inspect
import sys
from typing import Any, ForwardRef, Optional, get_type_hints

from ..domain.declared_types import is_class_level, is_final, unwrap
from ..domain.invoker import mangled_name
from ..domain.models import FieldDescriptor

_IMPLICIT_SLOTS = {"__dict__", "__weakref__"}


class ClassFieldScanner:
    """Lists the fields a class declares itself, ignoring its bases.

    A field is declared by an annotation in the class body (``ClassVar`` and
    ``InitVar`` excluded) or by an entry of the class's own ``__slots__``.
    String annotations are evaluated in the defining module; those that cannot
    be evaluated are kept as text and the field is typed as ``object``.
    """

    def declared_fields(self, owner: type) -> tuple[FieldDescriptor, ...]:
        namespace = vars(owner)
        params = namespace.get("__dataclass_params__")
        frozen = bool(params is not None and params.frozen)

        found: dict[str, FieldDescriptor] = {}
        for name, annotation in _resolved_annotations(owner).items():
            if is_class_level(annotation):
                continue
            found[name] = FieldDescriptor(
                owner=owner,
                name=name,
                declared_type=_semantic_type(annotation),
                immutable=frozen or is_final(annotation),
                annotation=annotation,
            )

        slots = namespace.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in _IMPLICIT_SLOTS:
                continue
            name = mangled_name(owner, slot)
            if name not in found:
                found[name] = FieldDescriptor(owner=owner, name=name, declared_type=object, immutable=frozen)
        return tuple(found.values())

    def find(self, owner: type, name: str) -> Optional[FieldDescriptor]:
        for descriptor in self.declared_fields(owner):
            if descriptor.name == name:
                return descriptor
        return None


def _resolved_annotations(owner: type) -> dict[str, Any]:
    try:
        return dict(inspect.get_annotations(owner, eval_str=True))
    except (NameError, AttributeError, SyntaxError, TypeError):
        return {name: _resolve(raw, owner) for name, raw in _raw_annotations(owner).items()}


def _raw_annotations(owner: type) -> dict[str, Any]:
    try:
        return dict(inspect.get_annotations(owner))
    except NameError:
        # Deferred annotations (3.14+) naming something undefined.
        import annotationlib

        return dict(annotationlib.get_annotations(owner, format=annotationlib.Format.FORWARDREF))


def _resolve(raw: Any, owner: type) -> Any:
    if not isinstance(raw, str):
        return raw

    def holder():
        pass

    module = sys.modules.get(owner.__module__)
    try:
        holder.__annotations__ = {"value": ForwardRef(raw, is_class=True)}
        hints = get_type_hints(
            holder,
            globalns=vars(module) if module is not None else {},
            localns=dict(vars(owner)),
            include_extras=True,
        )
    except (NameError, AttributeError, SyntaxError, TypeError):
        return raw
    return hints["value"]


def _semantic_type(annotation: Any) -> Any:
    if isinstance(annotation, (str, ForwardRef)):
        return object
    return unwrap(annotation)
