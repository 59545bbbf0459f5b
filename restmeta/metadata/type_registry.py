"""Ordered type-keyed registry with assignability fallback.

Registrations are kept in first-registration order. Lookup resolves a queried
type deterministically:

1. Exact key match.
2. Otherwise every registered type the queried type is a subclass of
   (according to ``issubclass``) is a candidate. This covers real ancestors
   as well as abstract base classes with virtual subclasses
   (``int`` -> ``numbers.Number``) and runtime-checkable protocols, which
   never appear in ``__mro__``.
3. Candidates that another candidate subclasses are dropped, so the most
   specific registration wins (``numbers.Number`` beats ``object`` for
   ``int``).
4. Ties go to the candidate nearest in the queried type's MRO, then to
   registration order.

Re-registering a type replaces its value and keeps its original position.

Usage:
    registry: TypeRegistry[str] = TypeRegistry()
    registry.register(numbers.Number, "number")
    registry.find(int)  # "number"
    registry.get(int)   # None (exact lookup only)
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Generic, TypeVar

V = TypeVar("V")


def is_assignable(type_: type, registered: type) -> bool:
    """Return True if ``type_`` is the same as, or a subtype of, ``registered``.

    ``issubclass`` raises TypeError for protocols that are not
    runtime-checkable; those are treated as not assignable.
    """
    try:
        return issubclass(type_, registered)
    except TypeError:
        return False


class TypeRegistry(Generic[V]):
    """Registry mapping classes to values.

    Not synchronized. Populate during startup, then share read-only.
    """

    def __init__(self) -> None:
        self._entries: dict[type, V] = {}

    def register(self, type_: type, value: V) -> V | None:
        """Set ``value`` for ``type_``, returning the value it replaced."""
        previous = self._entries.get(type_)
        self._entries[type_] = value
        return previous

    def get(self, type_: type) -> V | None:
        """Exact-key lookup. Returns None for anything that is not a class."""
        if not isinstance(type_, type):
            return None
        return self._entries.get(type_)

    def find(self, type_: type) -> V | None:
        """Lookup with assignability fallback (see module docstring)."""
        if not isinstance(type_, type):
            return None
        if type_ in self._entries:
            return self._entries[type_]

        candidates = [
            registered
            for registered in self._entries
            if is_assignable(type_, registered)
        ]
        if not candidates:
            return None

        # drop any candidate a more specific candidate already covers
        most_specific = [
            candidate
            for candidate in candidates
            if not any(
                other is not candidate and is_assignable(other, candidate)
                for other in candidates
            )
        ] or candidates

        mro = type_.__mro__
        order = list(self._entries)
        best = min(
            most_specific,
            key=lambda c: (
                mro.index(c) if c in mro else len(mro),
                order.index(c),
            ),
        )
        return self._entries[best]

    def as_mapping(self) -> Mapping[type, V]:
        """Read-only snapshot of the registrations, in registration order."""
        return MappingProxyType(dict(self._entries))

    def __contains__(self, type_: object) -> bool:
        return type_ in self._entries

    def __iter__(self) -> Iterator[type]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        names = ", ".join(t.__qualname__ for t in self._entries)
        return f"{type(self).__name__}([{names}])"
