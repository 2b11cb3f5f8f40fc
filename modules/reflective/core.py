"""Reflective invocation — call a resolved accessor the slow, dynamic way.

Every call checks the receiver type, re-fetches the accessor from the
instance's own class with ``inspect.getattr_static`` and only then
dispatches, so an override in a subclass is what runs. This is the
per-call cost that synthesis pays once.
"""

from __future__ import annotations

import inspect
import logging
import operator
from typing import TYPE_CHECKING, Any

from domain.models import AccessorKind, AccessorSource

if TYPE_CHECKING:
    from collections.abc import Callable

    from domain.models import AccessorMethodReference

logger = logging.getLogger("synthaccess.reflective")

_MISSING = object()


def invoke_getter(reference: AccessorMethodReference, instance: Any) -> Any:
    """Read the property of *instance* through *reference*, resolving on the fly.

    Raises:
        TypeError: *reference* is not a READ accessor, or *instance* is not
            an instance of the accessor's declaring class.
        AttributeError: The accessor has been removed from the instance's
            class, or replaced by something of another kind, since it was
            resolved.
    """
    _check_call(reference, AccessorKind.READ, instance)
    return _lookup(reference, instance)(instance)


def invoke_setter(reference: AccessorMethodReference, instance: Any, value: Any) -> None:
    """Write *value* into the property of *instance* through *reference*.

    Same checks as :func:`invoke_getter`, for WRITE accessors.
    """
    _check_call(reference, AccessorKind.WRITE, instance)
    _lookup(reference, instance)(instance, value)


def _check_call(reference: AccessorMethodReference, kind: AccessorKind, instance: Any) -> None:
    if reference.kind is not kind:
        msg = f"{reference.qualified_name} is a {reference.kind.value} accessor"
        raise TypeError(msg)
    if not isinstance(instance, reference.declaring_class):
        msg = (
            f"{type(instance).__qualname__} is not an instance of "
            f"{reference.declaring_class.__qualname__}"
        )
        raise TypeError(msg)


def _lookup(reference: AccessorMethodReference, instance: Any) -> Callable[..., Any]:
    """Fetch the accessor afresh from the class of *instance*."""
    name = reference.accessor_name
    reading = reference.kind is AccessorKind.READ

    if reference.source is AccessorSource.FIELD:
        if reading:
            return operator.attrgetter(name)
        return lambda obj, value: setattr(obj, name, value)

    attr = inspect.getattr_static(type(instance), name, _MISSING)
    accessor: Any = None
    if reference.source is AccessorSource.PROPERTY and isinstance(attr, property):
        accessor = attr.fget if reading else attr.fset
    elif reference.source is AccessorSource.BEAN_METHOD and inspect.isfunction(attr):
        accessor = attr
    elif reference.source is AccessorSource.SLOT and inspect.ismemberdescriptor(attr):
        accessor = attr.__get__ if reading else attr.__set__

    if accessor is None:
        logger.warning("Accessor %s vanished after resolution", reference.qualified_name)
        msg = f"{reference.qualified_name} is no longer a {reference.source.value} accessor"
        raise AttributeError(msg)
    return accessor
