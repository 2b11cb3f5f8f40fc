"""Exceptions raised while building accessors.

Both errors are construction-time failures. Once a synthetic accessor
exists, calling it raises only what the underlying accessor raises.
"""

from __future__ import annotations


def _type_name(owner: object) -> str:
    if isinstance(owner, type):
        return f"{owner.__module__}.{owner.__qualname__}"
    return repr(owner)


class AccessorError(Exception):
    """Base class for resolution and synthesis failures."""

    action = "build accessor"

    def __init__(self, owner: object, property_name: str, reason: str) -> None:
        self.owner = owner
        self.property_name = property_name
        self.reason = reason
        super().__init__(
            f"Unable to {self.action} for property {property_name!r} of "
            f"{_type_name(owner)}: {reason}"
        )


class PropertyResolutionError(AccessorError):
    """Raised when a property or one of its accessors cannot be located."""

    action = "resolve accessor"


class SynthesisError(AccessorError):
    """Raised when a resolved accessor cannot be bound to a callable."""

    action = "synthesize accessor"
