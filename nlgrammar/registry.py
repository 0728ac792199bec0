"""Registries of atomic type names and other grammar elements."""

from __future__ import annotations

from typing import Generic, Hashable, Iterable, TypeVar

T = TypeVar("T", bound=Hashable)


class Registry(Generic[T]):
    """A set of registered elements of any hashable kind."""

    def __init__(self, elements: Iterable[T] = ()) -> None:
        self._elements: dict[T, None] = dict.fromkeys(elements)

    def register(self, element: T) -> None:
        self._elements[element] = None

    def __contains__(self, element: object) -> bool:
        return element in self._elements

    def all(self) -> list[T]:
        """Every registered element, in registration order."""
        return list(self._elements)

    def remove(self, element: T) -> None:
        """Unregister an element; unknown elements are ignored."""
        self._elements.pop(element, None)

    def clear(self) -> None:
        self._elements.clear()

    def __len__(self) -> int:
        return len(self._elements)


class AtomicTypeRegistry:
    """The atomic type names (such as ``S`` or ``NP``) a grammar knows."""

    def __init__(self) -> None:
        self._types: Registry[str] = Registry()

    def register(self, type_name: str) -> None:
        self._types.register(type_name)

    def is_registered(self, type_name: str) -> bool:
        return type_name in self._types

    def all_types(self) -> list[str]:
        return self._types.all()

    def remove(self, type_name: str) -> None:
        self._types.remove(type_name)

    def clear(self) -> None:
        self._types.clear()

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._types