"""
wiring.py — Binder registry and the resolve-then-synthesize facade.

Maps each binder name to its implementation so the harness and the CLI
can select a synthesis strategy by name. New binders are registered here
and nowhere else; the resolver and the synthesizer never import adapters.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from adapters.generated_binder import GeneratedBinder
from modules.resolver.core import resolve_getter_method, resolve_setter_method
from modules.synthesizer.core import DirectBinder, synthesize_getter, synthesize_setter

if TYPE_CHECKING:
    from domain.models import ResolutionContext, SyntheticGetter, SyntheticSetter
    from domain.ports import AccessorBinder

logger = logging.getLogger("synthaccess.wiring")

# ---------------------------------------------------------------------------
# Binder registry
# ---------------------------------------------------------------------------

BINDERS: dict[str, Callable[[], AccessorBinder]] = {
    "direct": DirectBinder,
    "generated": GeneratedBinder,
}

DEFAULT_BINDER = "generated"


def get_binder(name: str = DEFAULT_BINDER) -> AccessorBinder:
    """Instantiate the binder registered under *name*.

    Raises:
        ValueError: No binder is registered under *name*.
    """
    try:
        factory = BINDERS[name]
    except KeyError:
        known = ", ".join(sorted(BINDERS))
        msg = f"Unknown binder {name!r} (known: {known})"
        raise ValueError(msg) from None
    return factory()


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------


def build_accessors(
    owner: type,
    property_name: str,
    *,
    binder: str = DEFAULT_BINDER,
    context: ResolutionContext | None = None,
) -> tuple[SyntheticGetter, SyntheticSetter]:
    """Resolve and synthesize both accessors of *property_name* in one step.

    Returns:
        ``(getter, setter)`` bound with the named binder.

    Raises:
        PropertyResolutionError: From the resolver.
        SynthesisError: From the synthesizer.
        ValueError: Unknown binder name.
    """
    impl = get_binder(binder)
    getter = synthesize_getter(resolve_getter_method(owner, property_name, context), impl)
    setter = synthesize_setter(resolve_setter_method(owner, property_name, context), impl)
    logger.info("Built %s accessors for %s.%s", impl.name, owner.__qualname__, property_name)
    return getter, setter
