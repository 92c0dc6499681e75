"""Property discovery for composite objects.

A composite object exposes an ordered list of named properties. They are
discovered, in order of preference, from:

1. An explicit registration on the ``PropertyEnumerator`` in use.
2. A ``__graph_properties__`` declaration on the type: a sequence of names,
   or of ``(name, getter)`` pairs where ``getter`` takes the instance.
3. Dataclass fields, pydantic model fields (then computed fields), or named
   tuple fields.
4. Otherwise: ``__slots__`` entries and public ``property`` descriptors
   (base classes first, in declaration order), then public instance
   attributes in assignment order.

Names starting with an underscore are never enumerated implicitly.

Two instances of the same class may carry different instance attributes.
When both sides are discovered implicitly, ``properties_of_both`` lists the
union of their attributes; an attribute absent on one side reads as
``MISSING``.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from .classifier import is_named_tuple
from .exceptions import IntrospectionError

GRAPH_PROPERTIES_ATTR = "__graph_properties__"

PropertySpec = str | tuple[str, Callable[[Any], Any]]


class _Missing:
    def __repr__(self) -> str:
        return "<missing>"


MISSING: Any = _Missing()


@dataclass(frozen=True)
class PropertyAccessor:
    """A named, zero-argument readable value of a composite object."""

    name: str
    getter: Callable[[Any], Any]
    optional: bool = False

    def read(self, obj: Any) -> Any:
        """Read the property value from an instance."""
        return self.getter(obj)


def read_property(accessor: PropertyAccessor, obj: Any, path: str | None = None) -> Any:
    """Read a property, wrapping any failure of its getter.

    Raises:
        IntrospectionError: If the getter raised.
    """
    try:
        return accessor.read(obj)
    except Exception as exc:
        raise IntrospectionError(
            f"Cannot read property '{accessor.name}' of {type(obj).__qualname__}: {exc}",
            path=path,
            property_name=accessor.name,
        ) from exc


def _attribute_getter(name: str) -> Callable[[Any], Any]:
    def _get(obj: Any) -> Any:
        return getattr(obj, name)

    return _get


def _to_accessors(specs: Iterable[PropertySpec]) -> tuple[PropertyAccessor, ...]:
    accessors = []
    for spec in specs:
        if isinstance(spec, str):
            accessors.append(PropertyAccessor(name=spec, getter=_attribute_getter(spec)))
        else:
            name, getter = spec
            accessors.append(PropertyAccessor(name=name, getter=getter))
    return tuple(accessors)


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _optional_getter(name: str) -> Callable[[Any], Any]:
    def _get(obj: Any) -> Any:
        return getattr(obj, name, MISSING)

    return _get


def _implicit_accessors(obj: Any) -> tuple[PropertyAccessor, ...]:
    """Slots and property descriptors, base classes first, then instance attributes.

    Slots and instance attributes are optional: another instance of the same
    class may not have them set.
    """
    accessors: dict[str, PropertyAccessor] = {}
    for klass in reversed(type(obj).__mro__):
        if klass is object:
            continue
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if _is_public(slot) and hasattr(obj, slot):
                accessors[slot] = PropertyAccessor(name=slot, getter=_optional_getter(slot), optional=True)
        for attr_name, attr in klass.__dict__.items():
            if isinstance(attr, property) and _is_public(attr_name):
                accessors[attr_name] = PropertyAccessor(name=attr_name, getter=_attribute_getter(attr_name))
    for attr_name in getattr(obj, "__dict__", {}):
        if _is_public(attr_name) and attr_name not in accessors:
            accessors[attr_name] = PropertyAccessor(name=attr_name, getter=_optional_getter(attr_name), optional=True)
    return tuple(accessors.values())


class PropertyEnumerator:
    """Discovers the properties exposed by composite objects.

    Explicit registrations take precedence over any discovery convention and
    are looked up along the type's MRO, so a registration for a base class
    also applies to its subclasses.

    Example:
        >>> enumerator = PropertyEnumerator()
        >>> enumerator.register(Point, ["x", "y"])
        >>> [accessor.name for accessor in enumerator.properties_of(Point(1, 2))]
        ['x', 'y']
    """

    def __init__(self) -> None:
        self._registered: dict[type, tuple[PropertyAccessor, ...]] = {}

    def register(self, type_: type, properties: Iterable[PropertySpec]) -> PropertyEnumerator:
        """Declare the properties of a type explicitly.

        Args:
            type_: Type whose instances expose the properties.
            properties: Property names, or ``(name, getter)`` pairs.

        Returns:
            The enumerator, for chaining.
        """
        self._registered[type_] = _to_accessors(properties)
        return self

    def _explicit_properties(self, obj: Any) -> tuple[PropertyAccessor, ...] | None:
        obj_type = type(obj)
        for klass in obj_type.__mro__:
            if klass in self._registered:
                return self._registered[klass]

        declared = getattr(obj_type, GRAPH_PROPERTIES_ATTR, None)
        if declared is not None:
            if callable(declared):
                declared = declared()
            return _to_accessors(declared)

        if dataclasses.is_dataclass(obj):
            return _to_accessors(field.name for field in dataclasses.fields(obj))

        if isinstance(obj, BaseModel):
            names = list(obj_type.model_fields) + list(obj_type.model_computed_fields)
            return _to_accessors(names)

        if is_named_tuple(obj):
            return _to_accessors(obj_type._fields)

        return None

    def properties_of(self, obj: Any) -> tuple[PropertyAccessor, ...]:
        """List the properties of an instance, in a stable order.

        Args:
            obj: Composite object to inspect.

        Returns:
            Tuple of accessors, one per property.
        """
        explicit = self._explicit_properties(obj)
        return explicit if explicit is not None else _implicit_accessors(obj)

    def properties_of_both(self, lhs: Any, rhs: Any) -> tuple[PropertyAccessor, ...]:
        """List the properties to compare between two instances.

        The properties of ``lhs``, followed by the optional properties (slots
        and instance attributes) only ``rhs`` has, when both are discovered
        implicitly. Reading an optional property absent on an instance gives
        ``MISSING``.
        """
        explicit = self._explicit_properties(lhs)
        if explicit is not None:
            return explicit
        accessors = {accessor.name: accessor for accessor in _implicit_accessors(lhs)}
        if self._explicit_properties(rhs) is None:
            for accessor in _implicit_accessors(rhs):
                if accessor.optional:
                    accessors.setdefault(accessor.name, accessor)
        return tuple(accessors.values())


default_enumerator = PropertyEnumerator()


__all__ = [
    "GRAPH_PROPERTIES_ATTR",
    "MISSING",
    "PropertyAccessor",
    "PropertyEnumerator",
    "PropertySpec",
    "default_enumerator",
    "read_property",
]
