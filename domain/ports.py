"""Port interfaces for synthaccess.

All ports are defined as typing.Protocol — structural subtyping means any class
with matching method signatures satisfies the Protocol without inheritance.

This module has ZERO external imports — only stdlib and typing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from domain.models import AccessorMethodReference, SyntheticGetter, SyntheticSetter


class AccessorBinder(Protocol):
    """Turns a resolved accessor into a callable bound to it.

    Implementations run once per accessor. Whatever they return is called
    directly by the harness, so it must not look anything up per call.
    """

    name: str

    def bind_getter(self, reference: AccessorMethodReference) -> SyntheticGetter:
        """Return a callable ``(instance) -> value`` bound to *reference*."""
        ...

    def bind_setter(self, reference: AccessorMethodReference) -> SyntheticSetter:
        """Return a callable ``(instance, value) -> None`` bound to *reference*."""
        ...
