"""Accessor synthesizer — bind a resolved accessor to a reusable callable.

Synthesis is the one-time "bind" phase: the reference is checked against
the expected call shape, handed to an ``AccessorBinder`` and the result is
returned as a plain callable. Invoking that callable is the repeatable
"invoke" phase and repeats none of the resolution work.

The default ``DirectBinder`` hands back the reference's dispatching target,
so a synthetic getter costs one call plus the same attribute lookup a direct
``pojo.get_field()`` performs. Other binders (see
``adapters/generated_binder.py``) plug in through the same protocol.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any

from domain.errors import SynthesisError
from domain.models import AccessorKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from domain.models import AccessorMethodReference, SyntheticGetter, SyntheticSetter
    from domain.ports import AccessorBinder

logger = logging.getLogger("synthaccess.synthesizer")


class DirectBinder:
    """AccessorBinder that binds to the resolved target as-is."""

    name = "direct"

    def bind_getter(self, reference: AccessorMethodReference) -> SyntheticGetter:
        return reference.target

    def bind_setter(self, reference: AccessorMethodReference) -> SyntheticSetter:
        return reference.target


_DEFAULT_BINDER = DirectBinder()

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def synthesize_getter(
    reference: AccessorMethodReference,
    binder: AccessorBinder | None = None,
) -> SyntheticGetter:
    """Produce a callable ``(instance) -> value`` bound to *reference*.

    Args:
        reference: A READ reference from ``resolve_getter_method``.
        binder: Binding strategy; ``DirectBinder`` when omitted.

    Raises:
        SynthesisError: The reference is not a getter-shaped accessor, or
            the binder could not produce a callable. The binder's exception
            is chained as ``__cause__``.
    """
    binder = binder or _DEFAULT_BINDER
    _check_shape(reference, AccessorKind.READ, 1)
    return _bind(reference, binder, binder.bind_getter)


def synthesize_setter(
    reference: AccessorMethodReference,
    binder: AccessorBinder | None = None,
) -> SyntheticSetter:
    """Produce a callable ``(instance, value) -> None`` bound to *reference*.

    Same rules as :func:`synthesize_getter`, for WRITE references.
    """
    binder = binder or _DEFAULT_BINDER
    _check_shape(reference, AccessorKind.WRITE, 2)
    return _bind(reference, binder, binder.bind_setter)


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------


def _bind(
    reference: AccessorMethodReference,
    binder: AccessorBinder,
    bind: Callable[[AccessorMethodReference], Any],
) -> Any:
    try:
        bound = bind(reference)
    except Exception as exc:
        raise SynthesisError(
            reference.owner,
            reference.property_name,
            f"{binder.name} binder failed for {reference.qualified_name}: {exc}",
        ) from exc

    if not callable(bound):
        raise SynthesisError(
            reference.owner,
            reference.property_name,
            f"{binder.name} binder returned a non-callable {type(bound).__name__}",
        )

    logger.debug(
        "Synthesized %s for %s.%s via %s binder",
        "getter" if reference.kind is AccessorKind.READ else "setter",
        reference.owner.__qualname__,
        reference.property_name,
        binder.name,
    )
    return bound


def _check_shape(reference: AccessorMethodReference, kind: AccessorKind, arity: int) -> None:
    """Reject references that cannot be called as ``kind`` with *arity* arguments."""
    if reference.kind is not kind:
        raise SynthesisError(
            reference.owner,
            reference.property_name,
            f"expected a {kind.value} accessor, got {reference.kind.value}",
        )

    if not callable(reference.target):
        raise SynthesisError(
            reference.owner,
            reference.property_name,
            f"{reference.qualified_name} is not callable",
        )

    try:
        signature = inspect.signature(_declared(reference))
    except (TypeError, ValueError):
        # Builtins without a text signature cannot be checked here.
        return

    try:
        signature.bind(*range(arity))
    except TypeError as exc:
        raise SynthesisError(
            reference.owner,
            reference.property_name,
            f"{reference.qualified_name}{signature} cannot take {arity} positional argument(s)",
        ) from exc

    if kind is AccessorKind.READ and signature.return_annotation in (None, "None"):
        raise SynthesisError(
            reference.owner,
            reference.property_name,
            f"{reference.qualified_name} is annotated to return None",
        )


def _declared(reference: AccessorMethodReference) -> Callable[..., Any]:
    """The callable whose signature describes the accessor's shape."""
    if reference.declared is not None:
        return reference.declared
    return reference.target
