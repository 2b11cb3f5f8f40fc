"""Benchmark harness — direct vs synthetic vs reflective property access.

Drives the accessor core through its public contract. Each strategy gets
one state object, built once (resolution and synthesis happen there), and
a pair of benchmark functions that only invoke:

- direct:     ``pojo.get_field()`` / ``pojo.set_field(v)``
- synthetic:  ``getter(pojo)`` / ``setter(pojo, v)``
- reflective: ``invoke_getter(ref, pojo)`` / ``invoke_setter(ref, pojo, v)``

Timing uses ``timeit.Timer.repeat`` and keeps the best run.
"""

from __future__ import annotations

import logging
import random
import string
import timeit
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import wiring
from domain.models import Measurement, Strategy
from modules.reflective.core import invoke_getter, invoke_setter
from modules.resolver.core import resolve_getter_method, resolve_setter_method

if TYPE_CHECKING:
    from collections.abc import Callable

    from domain.models import (
        AccessorMethodReference,
        BenchConfig,
        SyntheticGetter,
        SyntheticSetter,
    )

logger = logging.getLogger("synthaccess.benchmarks.harness")


class BenchPojo:
    """Bean-style object whose ``field`` property is benchmarked."""

    def __init__(self, field: str) -> None:
        self._field = field

    def get_field(self) -> str:
        return self._field

    def set_field(self, field: str) -> None:
        self._field = field


def random_value(length: int, rng: random.Random) -> str:
    """Random lowercase string, so the written value is never a constant."""
    return "".join(rng.choices(string.ascii_lowercase, k=length))


# ---------------------------------------------------------------------------
# Benchmark states
# ---------------------------------------------------------------------------


@dataclass
class CommonState:
    """Pojo and value shared by every strategy."""

    config: BenchConfig
    pojo: BenchPojo = field(init=False)
    new_value: str = field(init=False)

    def __post_init__(self) -> None:
        rng = random.Random(self.config.seed)
        self.pojo = BenchPojo(self.config.initial_value)
        self.new_value = random_value(self.config.value_length, rng)


@dataclass
class ReflectiveState(CommonState):
    """Resolved references, invoked reflectively on every call."""

    getter: AccessorMethodReference = field(init=False)
    setter: AccessorMethodReference = field(init=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        self.getter = resolve_getter_method(BenchPojo, self.config.property_name)
        self.setter = resolve_setter_method(BenchPojo, self.config.property_name)


@dataclass
class SyntheticState(CommonState):
    """Accessors synthesized once with the configured binder."""

    getter: SyntheticGetter = field(init=False)
    setter: SyntheticSetter = field(init=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        self.getter, self.setter = wiring.build_accessors(
            BenchPojo,
            self.config.property_name,
            binder=self.config.binder,
        )


# ---------------------------------------------------------------------------
# Benchmark functions
# ---------------------------------------------------------------------------


def bench_direct_getter(state: CommonState) -> object:
    return state.pojo.get_field()


def bench_direct_setter(state: CommonState) -> object:
    state.pojo.set_field(state.new_value)
    return state.pojo


def bench_synthetic_getter(state: SyntheticState) -> object:
    return state.getter(state.pojo)


def bench_synthetic_setter(state: SyntheticState) -> object:
    state.setter(state.pojo, state.new_value)
    return state.pojo


def bench_reflective_getter(state: ReflectiveState) -> object:
    return invoke_getter(state.getter, state.pojo)


def bench_reflective_setter(state: ReflectiveState) -> object:
    invoke_setter(state.setter, state.pojo, state.new_value)
    return state.pojo


@dataclass(frozen=True)
class BenchmarkCase:
    """One benchmark function and the state it runs against."""

    name: str
    strategy: Strategy
    operation: str
    function: Callable[[Any], object]
    state_type: type[CommonState]


BENCHMARKS: tuple[BenchmarkCase, ...] = (
    BenchmarkCase("direct_getter", Strategy.DIRECT, "get", bench_direct_getter, CommonState),
    BenchmarkCase("direct_setter", Strategy.DIRECT, "set", bench_direct_setter, CommonState),
    BenchmarkCase(
        "synthetic_getter", Strategy.SYNTHETIC, "get", bench_synthetic_getter, SyntheticState
    ),
    BenchmarkCase(
        "synthetic_setter", Strategy.SYNTHETIC, "set", bench_synthetic_setter, SyntheticState
    ),
    BenchmarkCase(
        "reflective_getter", Strategy.REFLECTIVE, "get", bench_reflective_getter, ReflectiveState
    ),
    BenchmarkCase(
        "reflective_setter", Strategy.REFLECTIVE, "set", bench_reflective_setter, ReflectiveState
    ),
)


# ---------------------------------------------------------------------------
# Running
# ---------------------------------------------------------------------------


def run_benchmark(case: BenchmarkCase, state: CommonState, config: BenchConfig) -> Measurement:
    """Time *case* against *state* and return the best of ``config.repeat`` runs."""
    function = case.function
    timer = timeit.Timer(lambda: function(state))
    runs = timer.repeat(repeat=config.repeat, number=config.number)
    best = min(runs)
    logger.info("%s: best %.6fs for %d calls", case.name, best, config.number)
    return Measurement(
        name=case.name,
        strategy=case.strategy,
        operation=case.operation,
        calls=config.number,
        best_seconds=best,
    )


def run_benchmarks(config: BenchConfig) -> tuple[Measurement, ...]:
    """Run every benchmark whose strategy is enabled in *config*.

    Each state type is constructed once and shared by its getter and setter
    benchmarks.

    Raises:
        PropertyResolutionError: The configured property cannot be resolved.
        SynthesisError: The configured binder cannot bind it.
        ValueError: Unknown binder name.
    """
    states: dict[type[CommonState], CommonState] = {}
    results: list[Measurement] = []
    for case in BENCHMARKS:
        if case.strategy not in config.strategies:
            continue
        state = states.get(case.state_type)
        if state is None:
            state = states[case.state_type] = case.state_type(config)
        results.append(run_benchmark(case, state, config))
    return tuple(results)
