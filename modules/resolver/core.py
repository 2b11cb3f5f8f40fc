"""Property resolver — locate the read and write accessors of a property.

Maps a ``(class, property name)`` pair to ``AccessorMethodReference`` values
using the interpreter's own introspection: ``inspect.getattr_static`` over
the MRO (descriptors are inspected, never executed), ``inspect.signature``
for accessor arity, and ``dataclasses`` / class annotations for plain
instance attributes.

Discovery order for a property ``x``:

1. a ``property`` named ``x`` (``fget`` / ``fset``),
2. bean-style methods: ``get_x`` / ``getX`` (or boolean ``is_x`` / ``isX``)
   and ``set_x`` / ``setX``,
3. a ``__slots__`` member or a dataclass field / annotated attribute ``x``.

Nothing is cached; callers resolve once and keep the reference. A
reference's ``target`` looks the accessor up on the type of the instance it
is called with, so an override in a subclass is what runs.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
import operator
from typing import TYPE_CHECKING, Any

from domain.errors import PropertyResolutionError
from domain.models import (
    DEFAULT_CONTEXT,
    AccessorKind,
    AccessorMethodReference,
    AccessorSource,
    PropertyInfo,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from domain.models import ResolutionContext

logger = logging.getLogger("synthaccess.resolver")

_MISSING = object()

# Prefixes ending in "_" are snake_case (get_x); the rest are camelCase (getX).
_READ_PREFIXES: tuple[str, ...] = ("get_", "get")
_BOOL_PREFIXES: tuple[str, ...] = ("is_", "is")
_WRITE_PREFIXES: tuple[str, ...] = ("set_", "set")

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def resolve_getter_method(
    owner: type,
    property_name: str,
    context: ResolutionContext | None = None,
) -> AccessorMethodReference:
    """Resolve the read accessor of *property_name* on *owner*.

    Args:
        owner: Class to inspect. Inherited accessors are found.
        property_name: Logical property name, e.g. ``"field"``.
        context: Resolution settings; ``DEFAULT_CONTEXT`` when omitted.

    Returns:
        Reference to a callable ``(instance) -> value``.

    Raises:
        PropertyResolutionError: No such property, no read accessor, or
            (with ``require_pair``) no write accessor either.
    """
    ctx = context or DEFAULT_CONTEXT
    info = describe_property(owner, property_name, ctx)
    return _select(info, AccessorKind.READ, ctx)


def resolve_setter_method(
    owner: type,
    property_name: str,
    context: ResolutionContext | None = None,
) -> AccessorMethodReference:
    """Resolve the write accessor of *property_name* on *owner*.

    Same rules as :func:`resolve_getter_method`, for the write direction.
    The returned reference targets a callable ``(instance, value) -> None``.
    """
    ctx = context or DEFAULT_CONTEXT
    info = describe_property(owner, property_name, ctx)
    return _select(info, AccessorKind.WRITE, ctx)


def describe_property(
    owner: type,
    property_name: str,
    context: ResolutionContext | None = None,
) -> PropertyInfo:
    """Return both accessors found for *property_name* on *owner*.

    Either side of the returned ``PropertyInfo`` may be ``None``; the pair
    requirement of the context is applied by the ``resolve_*`` functions,
    not here.

    Raises:
        PropertyResolutionError: *owner* is not a class, the name is not a
            valid (or permitted) identifier, or nothing matches it.
    """
    ctx = context or DEFAULT_CONTEXT
    _validate(owner, property_name, ctx)

    info = _from_property(owner, property_name) or _from_bean_methods(owner, property_name)
    if info is None and ctx.include_fields:
        info = _from_fields(owner, property_name)
    if info is None:
        raise PropertyResolutionError(owner, property_name, "no such property")
    return info


def list_properties(
    owner: type,
    context: ResolutionContext | None = None,
) -> tuple[PropertyInfo, ...]:
    """Enumerate every property discoverable on *owner*, sorted by name.

    Candidates that turn out not to be properties (e.g. ``get_item(self, key)``)
    are skipped.
    """
    ctx = context or DEFAULT_CONTEXT
    if not inspect.isclass(owner):
        raise PropertyResolutionError(owner, "*", "not a class")

    found: list[PropertyInfo] = []
    for name in sorted(set(_candidate_names(owner, ctx))):
        if name.startswith("_") and not ctx.allow_private:
            continue
        try:
            found.append(describe_property(owner, name, ctx))
        except PropertyResolutionError as exc:
            logger.debug("Skipping candidate %r on %s: %s", name, owner.__qualname__, exc.reason)
    return tuple(found)


# ---------------------------------------------------------------------------
# Validation and selection
# ---------------------------------------------------------------------------


def _validate(owner: Any, property_name: str, ctx: ResolutionContext) -> None:
    if not inspect.isclass(owner):
        raise PropertyResolutionError(owner, property_name, "not a class")
    if not isinstance(property_name, str) or not property_name.isidentifier():
        raise PropertyResolutionError(owner, str(property_name), "not a valid property name")
    if property_name.startswith("_") and not ctx.allow_private:
        raise PropertyResolutionError(owner, property_name, "non-public property")


def _select(
    info: PropertyInfo,
    kind: AccessorKind,
    ctx: ResolutionContext,
) -> AccessorMethodReference:
    if kind is AccessorKind.READ:
        wanted, other, other_kind = info.read, info.write, AccessorKind.WRITE
    else:
        wanted, other, other_kind = info.write, info.read, AccessorKind.READ

    if wanted is None:
        raise PropertyResolutionError(info.owner, info.name, f"no {kind.value} accessor")
    if ctx.require_pair and other is None:
        raise PropertyResolutionError(
            info.owner,
            info.name,
            f"property has no {other_kind.value} accessor",
        )

    logger.debug(
        "Resolved %s accessor %s (%s) for %s.%s",
        kind.value,
        wanted.qualified_name,
        wanted.source.value,
        info.owner.__qualname__,
        info.name,
    )
    return wanted


# ---------------------------------------------------------------------------
# Discovery strategies
# ---------------------------------------------------------------------------


def _from_property(owner: type, name: str) -> PropertyInfo | None:
    attr = inspect.getattr_static(owner, name, _MISSING)
    if not isinstance(attr, property):
        return None

    return _attribute_info(
        owner,
        name,
        AccessorSource.PROPERTY,
        _declaring_class(owner, name),
        fget=attr.fget,
        fset=attr.fset,
    )


def _from_bean_methods(owner: type, name: str) -> PropertyInfo | None:
    read = _find_bean_accessor(owner, name, _READ_PREFIXES, AccessorKind.READ)
    if read is None:
        read = _find_bean_accessor(owner, name, _BOOL_PREFIXES, AccessorKind.READ, boolean=True)
    write = _find_bean_accessor(owner, name, _WRITE_PREFIXES, AccessorKind.WRITE)

    if read is None and write is None:
        return None
    return PropertyInfo(
        owner=owner,
        name=name,
        source=AccessorSource.BEAN_METHOD,
        read=read,
        write=write,
    )


def _from_fields(owner: type, name: str) -> PropertyInfo | None:
    frozen = _is_frozen_dataclass(owner)
    attr = inspect.getattr_static(owner, name, _MISSING)

    if inspect.ismemberdescriptor(attr):
        return _attribute_info(
            owner,
            name,
            AccessorSource.SLOT,
            _declaring_class(owner, name),
            writable=not frozen,
        )

    declaring = _field_declaring_class(owner, name)
    if declaring is None:
        return None
    return _attribute_info(owner, name, AccessorSource.FIELD, declaring, writable=not frozen)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _reference(
    owner: type,
    name: str,
    kind: AccessorKind,
    source: AccessorSource,
    accessor_name: str,
    declaring: type,
    target: Callable[..., Any],
    declared: Callable[..., Any] | None,
) -> AccessorMethodReference:
    return AccessorMethodReference(
        owner=owner,
        property_name=name,
        kind=kind,
        source=source,
        accessor_name=accessor_name,
        declaring_class=declaring,
        target=target,
        declared=declared,
    )


def _attribute_info(
    owner: type,
    name: str,
    source: AccessorSource,
    declaring: type,
    *,
    fget: Callable[..., Any] | None = None,
    fset: Callable[..., Any] | None = None,
    writable: bool = True,
) -> PropertyInfo:
    """PropertyInfo for an accessor reached as the attribute *name* itself.

    A property is readable and writable only where ``fget`` / ``fset`` exist;
    slots and fields are always readable and writable unless *writable* says
    otherwise.
    """
    is_property = source is AccessorSource.PROPERTY
    read = write = None
    if fget is not None or not is_property:
        read = _reference(
            owner, name, AccessorKind.READ, source, name, declaring, operator.attrgetter(name), fget
        )
    if fset is not None or (writable and not is_property):
        write = _reference(
            owner, name, AccessorKind.WRITE, source, name, declaring, _attribute_writer(name), fset
        )
    return PropertyInfo(owner=owner, name=name, source=source, read=read, write=write)


def _accessor_names(name: str, prefixes: tuple[str, ...]) -> Iterator[str]:
    for prefix in prefixes:
        if prefix.endswith("_"):
            yield prefix + name
        else:
            yield prefix + name[:1].upper() + name[1:]


def _find_bean_accessor(
    owner: type,
    name: str,
    prefixes: tuple[str, ...],
    kind: AccessorKind,
    *,
    boolean: bool = False,
) -> AccessorMethodReference | None:
    arity = 1 if kind is AccessorKind.READ else 2
    for accessor_name in _accessor_names(name, prefixes):
        func = inspect.getattr_static(owner, accessor_name, _MISSING)
        if not inspect.isfunction(func) or not _accepts_positional(func, arity):
            continue
        if boolean and not _returns_bool(func):
            continue
        return _reference(
            owner,
            name,
            kind,
            AccessorSource.BEAN_METHOD,
            accessor_name,
            _declaring_class(owner, accessor_name),
            _method_dispatcher(accessor_name, kind),
            func,
        )
    return None


def _accepts_positional(func: Callable[..., Any], count: int) -> bool:
    """True if *func* can be called with exactly *count* positional arguments."""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return False
    try:
        signature.bind(*range(count))
    except TypeError:
        return False
    return True


def _returns_bool(func: Callable[..., Any]) -> bool:
    annotation = inspect.signature(func).return_annotation
    return annotation is bool or annotation == "bool"


def _declaring_class(owner: type, attr_name: str) -> type:
    for klass in inspect.getmro(owner):
        if attr_name in vars(klass):
            return klass
    return owner


def _field_declaring_class(owner: type, name: str) -> type | None:
    """Class that declares *name* as a dataclass field or annotated attribute."""
    if dataclasses.is_dataclass(owner):
        if name not in {f.name for f in dataclasses.fields(owner)}:
            return None
    for klass in inspect.getmro(owner):
        if klass is object:
            continue
        annotation = inspect.get_annotations(klass).get(name, _MISSING)
        if annotation is _MISSING or _is_class_var(annotation):
            continue
        return klass
    return None


def _is_class_var(annotation: object) -> bool:
    text = annotation if isinstance(annotation, str) else repr(annotation)
    return text.startswith(("ClassVar", "typing.ClassVar"))


def _is_frozen_dataclass(owner: type) -> bool:
    if not dataclasses.is_dataclass(owner):
        return False
    return bool(owner.__dataclass_params__.frozen)  # type: ignore[attr-defined]


def _attribute_writer(name: str) -> Callable[[Any, Any], None]:
    def write(instance: Any, value: Any) -> None:
        setattr(instance, name, value)

    write.__name__ = write.__qualname__ = f"set_{name}"
    return write


def _method_dispatcher(accessor_name: str, kind: AccessorKind) -> Callable[..., Any]:
    """Call *accessor_name* as found on the instance's own type."""
    if kind is AccessorKind.READ:
        return operator.methodcaller(accessor_name)

    def write(instance: Any, value: Any) -> None:
        getattr(instance, accessor_name)(value)

    write.__name__ = write.__qualname__ = accessor_name
    return write


def _candidate_names(owner: type, ctx: ResolutionContext) -> Iterator[str]:
    for attr_name, value in inspect.getmembers_static(owner):
        if attr_name.startswith("__"):
            continue
        if isinstance(value, property):
            yield attr_name
        elif inspect.isfunction(value):
            derived = _property_name_from_accessor(attr_name)
            if derived:
                yield derived
        elif ctx.include_fields and inspect.ismemberdescriptor(value):
            yield attr_name

    if not ctx.include_fields:
        return
    if dataclasses.is_dataclass(owner):
        yield from (f.name for f in dataclasses.fields(owner))
    for klass in inspect.getmro(owner):
        if klass is not object:
            yield from inspect.get_annotations(klass)


def _property_name_from_accessor(attr_name: str) -> str | None:
    for prefix in (*_READ_PREFIXES, *_BOOL_PREFIXES, *_WRITE_PREFIXES):
        if not attr_name.startswith(prefix) or len(attr_name) == len(prefix):
            continue
        rest = attr_name[len(prefix) :]
        if prefix.endswith("_"):
            return rest
        if rest[0].isupper():
            # getURL -> URL, getField -> field
            if len(rest) > 1 and rest[1].isupper():
                return rest
            return rest[0].lower() + rest[1:]
    return None
