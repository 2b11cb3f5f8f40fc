"""Named-closure adapter implementing AccessorBinder.

Builds one small forwarding function per accessor, closed over the resolved
target, and renames it (function and code object) after the property so
tracebacks and profiler output show ``Owner.synthetic_get_x`` instead of an
anonymous wrapper. The generated setter discards the target's return value,
so every synthetic setter returns ``None``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from domain.models import AccessorMethodReference, SyntheticGetter, SyntheticSetter

logger = logging.getLogger("synthaccess.generated_binder")


def _make_getter(target: Callable[[Any], Any]) -> Callable[[Any], Any]:
    def getter(instance: Any) -> Any:
        return target(instance)

    return getter


def _make_setter(target: Callable[[Any, Any], Any]) -> Callable[[Any, Any], None]:
    def setter(instance: Any, value: Any) -> None:
        target(instance, value)

    return setter


class GeneratedBinder:
    """AccessorBinder that wraps each accessor in its own named function.

    Parameters
    ----------
    prefix:
        Prepended to every function name; shows up in tracebacks and
        profiler output.

    """

    name = "generated"

    def __init__(self, prefix: str = "synthetic") -> None:
        if not prefix.isidentifier():
            msg = f"Function name prefix must be an identifier: {prefix!r}"
            raise ValueError(msg)
        self._prefix = prefix

    def bind_getter(self, reference: AccessorMethodReference) -> SyntheticGetter:
        """Return a named ``(instance) -> value`` function."""
        return self._rename(_make_getter(reference.target), reference, "get")

    def bind_setter(self, reference: AccessorMethodReference) -> SyntheticSetter:
        """Return a named ``(instance, value) -> None`` function."""
        return self._rename(_make_setter(reference.target), reference, "set")

    def _rename(
        self,
        fn: Callable[..., Any],
        reference: AccessorMethodReference,
        verb: str,
    ) -> Callable[..., Any]:
        fn_name = f"{self._prefix}_{verb}_{reference.property_name}"
        qualname = f"{reference.owner.__qualname__}.{fn_name}"

        fn.__name__ = fn_name
        fn.__qualname__ = qualname
        fn.__module__ = reference.owner.__module__
        fn.__code__ = fn.__code__.replace(co_name=fn_name, co_qualname=qualname)
        logger.debug("Bound %s to %s", qualname, reference.qualified_name)
        return fn
