"""Tests for adapters/generated_binder.py."""

from __future__ import annotations

import traceback
from typing import TYPE_CHECKING, Any

import pytest

from adapters.generated_binder import GeneratedBinder
from domain.errors import SynthesisError
from modules.resolver.core import resolve_getter_method, resolve_setter_method
from modules.synthesizer.core import synthesize_getter, synthesize_setter

if TYPE_CHECKING:
    from collections.abc import Callable

    from domain.models import AccessorMethodReference


class Account:
    def __init__(self) -> None:
        self._owner = "_initial"

    def get_owner(self) -> str:
        return self._owner

    def set_owner(self, value: str) -> str:
        self._owner = value
        return "ignored"


def test_getter_reads_value() -> None:
    binder = GeneratedBinder()
    getter = binder.bind_getter(resolve_getter_method(Account, "owner"))
    assert getter(Account()) == "_initial"


def test_setter_writes_value_and_returns_none() -> None:
    """Generated setters drop whatever the target returns."""
    binder = GeneratedBinder()
    setter = binder.bind_setter(resolve_setter_method(Account, "owner"))
    account = Account()
    assert setter(account, "abcdefgh") is None
    assert account.get_owner() == "abcdefgh"


def test_generated_functions_are_named_after_property() -> None:
    """Names and qualnames point at the owner, for readable tracebacks."""
    binder = GeneratedBinder()
    getter = binder.bind_getter(resolve_getter_method(Account, "owner"))
    setter = binder.bind_setter(resolve_setter_method(Account, "owner"))

    assert getter.__name__ == "synthetic_get_owner"
    assert setter.__name__ == "synthetic_set_owner"
    assert getter.__qualname__ == "Account.synthetic_get_owner"
    assert getter.__module__ == Account.__module__


def test_custom_prefix() -> None:
    getter = GeneratedBinder(prefix="fast").bind_getter(resolve_getter_method(Account, "owner"))
    assert getter.__name__ == "fast_get_owner"


def test_invalid_prefix_is_rejected() -> None:
    with pytest.raises(ValueError, match="must be an identifier"):
        GeneratedBinder(prefix="not valid")


def test_each_bind_produces_a_new_function() -> None:
    """Binding twice yields two equivalent but distinct functions."""
    binder = GeneratedBinder()
    ref = resolve_getter_method(Account, "owner")
    first, second = binder.bind_getter(ref), binder.bind_getter(ref)
    assert first is not second
    assert first(Account()) == second(Account())


def test_generated_frame_appears_in_traceback() -> None:
    """An exception from the accessor passes through the generated frame."""

    class Broken:
        def get_state(self) -> str:
            raise RuntimeError("broken accessor")

        def set_state(self, value: str) -> None:
            pass

    getter = GeneratedBinder().bind_getter(resolve_getter_method(Broken, "state"))
    with pytest.raises(RuntimeError) as excinfo:
        getter(Broken())

    names = [frame.name for frame in traceback.extract_tb(excinfo.value.__traceback__)]
    assert "synthetic_get_state" in names
    assert "get_state" in names


def test_works_through_synthesizer(any_pojo: Any, direct_read: Any) -> None:
    """The synthesizer accepts the generated binder for every convention."""
    binder = GeneratedBinder()
    owner = type(any_pojo)
    getter = synthesize_getter(resolve_getter_method(owner, "field"), binder)
    setter = synthesize_setter(resolve_setter_method(owner, "field"), binder)

    assert getter(any_pojo) == "_initial"
    setter(any_pojo, "abcdefgh")
    assert direct_read(any_pojo) == "abcdefgh"


def test_synthesizer_still_checks_shape() -> None:
    """Shape errors are raised before the generated binder runs."""
    with pytest.raises(SynthesisError):
        synthesize_getter(resolve_setter_method(Account, "owner"), GeneratedBinder())


def test_property_name_is_never_executed(
    make_reference: Callable[..., AccessorMethodReference],
) -> None:
    """A property name that is not an identifier only ends up in the function's name."""
    ref = make_reference(len, property_name="x(): pass\nimport os")
    getter = GeneratedBinder().bind_getter(ref)

    assert getter("abc") == 3
    assert getter.__name__ == "synthetic_get_x(): pass\nimport os"


def test_override_in_subclass_runs() -> None:
    """The generated getter dispatches on the instance's own type."""

    class LoudAccount(Account):
        def get_owner(self) -> str:
            return self._owner.upper()

    getter = GeneratedBinder().bind_getter(resolve_getter_method(Account, "owner"))
    assert getter(LoudAccount()) == "_INITIAL"
