"""Shared pytest fixtures and sample classes for synthaccess.

Provides:
- One sample class per accessor convention the resolver understands
- A parametrized fixture that yields an instance of each, set to "_initial"
- A factory for hand-built AccessorMethodReference values
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import pytest

from domain.models import AccessorKind, AccessorMethodReference, AccessorSource

if TYPE_CHECKING:
    from collections.abc import Callable

INITIAL = "_initial"


# ── Sample Classes ────────────────────────────────────────────────────────


class BeanPojo:
    """snake_case bean accessors: get_field / set_field."""

    def __init__(self, field: str = INITIAL) -> None:
        self._field = field

    def get_field(self) -> str:
        return self._field

    def set_field(self, field: str) -> None:
        self._field = field


class CamelPojo:
    """camelCase bean accessors: getField / setField."""

    def __init__(self, field: str = INITIAL) -> None:
        self._field = field

    def getField(self) -> str:  # noqa: N802
        return self._field

    def setField(self, field: str) -> None:  # noqa: N802
        self._field = field


class PropertyPojo:
    """A read/write ``property``."""

    def __init__(self, field: str = INITIAL) -> None:
        self._field = field

    @property
    def field(self) -> str:
        return self._field

    @field.setter
    def field(self, value: str) -> None:
        self._field = value


class SlottedPojo:
    """A ``__slots__`` member."""

    __slots__ = ("field",)

    def __init__(self, field: str = INITIAL) -> None:
        self.field = field


@dataclass
class DataPojo:
    """A mutable dataclass field."""

    field: str = INITIAL


SAMPLE_TYPES: tuple[type, ...] = (BeanPojo, CamelPojo, PropertyPojo, SlottedPojo, DataPojo)


def read_field(instance: Any) -> str:
    """Read ``field`` directly, whatever the convention."""
    if isinstance(instance, BeanPojo):
        return instance.get_field()
    if isinstance(instance, CamelPojo):
        return instance.getField()
    return instance.field  # type: ignore[no-any-return]


# ── Pytest Fixtures ──────────────────────────────────────────────────────


@pytest.fixture(params=SAMPLE_TYPES, ids=lambda t: t.__name__)
def any_pojo(request: pytest.FixtureRequest) -> Any:
    """Provide an instance of every sample class, holding "_initial"."""
    return request.param()


@pytest.fixture
def bean_pojo() -> BeanPojo:
    """Provide a BeanPojo holding "_initial"."""
    return BeanPojo()


@pytest.fixture
def direct_read() -> Callable[[Any], str]:
    """Provide ``read_field`` for checking values without the accessor core."""
    return read_field


@pytest.fixture
def make_reference() -> Callable[..., AccessorMethodReference]:
    """Factory for hand-built references, bypassing the resolver."""

    def _factory(
        target: Callable[..., Any],
        *,
        kind: AccessorKind = AccessorKind.READ,
        owner: type = BeanPojo,
        property_name: str = "field",
        source: AccessorSource = AccessorSource.BEAN_METHOD,
        accessor_name: str = "get_field",
    ) -> AccessorMethodReference:
        return AccessorMethodReference(
            owner=owner,
            property_name=property_name,
            kind=kind,
            source=source,
            accessor_name=accessor_name,
            declaring_class=owner,
            target=target,
        )

    return _factory
