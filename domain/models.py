"""Core data types for synthaccess.

All records are frozen dataclasses with complete type annotations.
This module has ZERO imports from outside the Python standard library.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class AccessorKind(Enum):
    """Direction of an accessor."""

    READ = "read"
    WRITE = "write"


class AccessorSource(Enum):
    """How an accessor was discovered on its class."""

    PROPERTY = "property"
    BEAN_METHOD = "bean_method"
    SLOT = "slot"
    FIELD = "field"


class Strategy(Enum):
    """Invocation strategy compared by the benchmark harness."""

    DIRECT = "direct"
    SYNTHETIC = "synthetic"
    REFLECTIVE = "reflective"


# ---------------------------------------------------------------------------
# Callable shapes produced by synthesis
# ---------------------------------------------------------------------------

SyntheticGetter = Callable[[Any], Any]
SyntheticSetter = Callable[[Any, Any], None]


# ---------------------------------------------------------------------------
# Resolution types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ResolutionContext:
    """Explicit settings for property resolution.

    Passed into the resolver rather than held as module state, so two
    callers can resolve against the same class under different rules.
    """

    allow_private: bool = False
    require_pair: bool = True
    include_fields: bool = True


DEFAULT_CONTEXT = ResolutionContext()


@dataclass(frozen=True)
class AccessorMethodReference:
    """A resolved read or write accessor for one property of one class.

    ``target`` is called as ``target(instance)`` for READ references and
    ``target(instance, value)`` for WRITE references. It looks the accessor
    up on the type of the instance it is given, so subclass overrides win.
    ``declared`` is the function found on ``declaring_class`` (``None`` for
    plain attributes) and is what signature checks inspect.

    Equality ignores ``target``: two resolutions of the same accessor are
    equal even though each builds its own dispatching callable.
    """

    owner: type
    property_name: str
    kind: AccessorKind
    source: AccessorSource
    accessor_name: str
    declaring_class: type
    target: Callable[..., Any] = field(compare=False)
    declared: Callable[..., Any] | None = None

    @property
    def qualified_name(self) -> str:
        """``Declaring.accessor`` label used in logs and error messages."""
        return f"{self.declaring_class.__qualname__}.{self.accessor_name}"


@dataclass(frozen=True)
class PropertyInfo:
    """Everything the resolver found for one property name."""

    owner: type
    name: str
    source: AccessorSource
    read: AccessorMethodReference | None = None
    write: AccessorMethodReference | None = None

    @property
    def readable(self) -> bool:
        return self.read is not None

    @property
    def writable(self) -> bool:
        return self.write is not None


# ---------------------------------------------------------------------------
# Benchmark types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BenchConfig:
    """Settings for one benchmark run."""

    property_name: str = "field"
    initial_value: str = "_initial"
    value_length: int = 8
    number: int = 100_000
    repeat: int = 5
    binder: str = "generated"
    seed: int | None = None
    strategies: tuple[Strategy, ...] = (
        Strategy.DIRECT,
        Strategy.SYNTHETIC,
        Strategy.REFLECTIVE,
    )


@dataclass(frozen=True)
class Measurement:
    """Best timing of one benchmark function."""

    name: str
    strategy: Strategy
    operation: str
    calls: int
    best_seconds: float

    @property
    def per_call_ns(self) -> float:
        """Average nanoseconds per call within the best run."""
        if self.calls <= 0:
            return 0.0
        return self.best_seconds / self.calls * 1e9
