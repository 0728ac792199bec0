"""Feature values, feature structures and their unification."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Union


class FeatureKind(enum.Enum):
    """The shape of a feature value."""

    UNSPECIFIED = "unspecified"
    ATOMIC = "atomic"
    SET = "set"
    COMPLEX = "complex"
    VARIABLE = "variable"


@dataclass(frozen=True)
class FeatureValue:
    """A morphosyntactic feature value such as ``sg`` or ``{sg, pl}``."""

    kind: FeatureKind
    payload: Union[str, tuple, "FeatureStructure", None] = None

    @classmethod
    def unspecified(cls) -> FeatureValue:
        return cls(FeatureKind.UNSPECIFIED)

    @classmethod
    def atomic(cls, value: str) -> FeatureValue:
        return cls(FeatureKind.ATOMIC, str(value))

    @classmethod
    def set_of(cls, values: Iterable[str]) -> FeatureValue:
        return cls(FeatureKind.SET, tuple(str(v) for v in values))

    @classmethod
    def complex(cls, structure: FeatureStructure) -> FeatureValue:
        return cls(FeatureKind.COMPLEX, structure.copy())

    @classmethod
    def variable(cls, name: str) -> FeatureValue:
        return cls(FeatureKind.VARIABLE, str(name))

    def __str__(self) -> str:
        if self.kind is FeatureKind.UNSPECIFIED:
            return "_"
        if self.kind is FeatureKind.ATOMIC:
            return self.payload
        if self.kind is FeatureKind.SET:
            return "{" + ", ".join(self.payload) + "}"
        if self.kind is FeatureKind.COMPLEX:
            return f"[{self.payload}]"
        return f"?{self.payload}"


def _coerce(value: Union[FeatureValue, str]) -> FeatureValue:
    if isinstance(value, FeatureValue):
        return value
    return FeatureValue.atomic(value)


@dataclass(eq=False)
class FeatureStructure:
    """A mapping from feature names to feature values."""

    features: dict = field(default_factory=dict)

    @classmethod
    def with_feature(cls, name: str, value: Union[FeatureValue, str]) -> FeatureStructure:
        structure = cls()
        structure.add(name, value)
        return structure

    def add(self, name: str, value: Union[FeatureValue, str]) -> None:
        """Set a feature; a plain string becomes an atomic value."""
        self.features[name] = _coerce(value)

    def get(self, name: str) -> FeatureValue | None:
        return self.features.get(name)

    def copy(self) -> FeatureStructure:
        return FeatureStructure(dict(self.features))

    def unifies_with(self, other: FeatureStructure) -> bool:
        """True if every feature shared with ``other`` has compatible values."""
        return all(
            values_unify(value, other.features[name])
            for name, value in self.features.items()
            if name in other.features
        )

    def unify(self, other: FeatureStructure) -> FeatureStructure | None:
        """Return the unification of both structures, or None if they clash."""
        if not self.unifies_with(other):
            return None
        result = self.copy()
        for name, value in other.features.items():
            mine = self.features.get(name)
            if mine is None:
                result.features[name] = value
                continue
            unified = unify_values(mine, value)
            if unified is None:
                return None
            result.features[name] = unified
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FeatureStructure):
            return NotImplemented
        return self.features == other.features

    def __hash__(self) -> int:
        return hash(frozenset(self.features.items()))

    def __str__(self) -> str:
        if not self.features:
            return ""
        body = ", ".join(f"{name}={value}" for name, value in self.features.items())
        return f"[{body}]"


def values_unify(first: FeatureValue, second: FeatureValue) -> bool:
    """Check whether two feature values are compatible."""
    kinds = (first.kind, second.kind)
    if FeatureKind.UNSPECIFIED in kinds:
        return True
    if kinds == (FeatureKind.ATOMIC, FeatureKind.ATOMIC):
        return first.payload == second.payload
    if kinds == (FeatureKind.SET, FeatureKind.SET):
        return any(item in second.payload for item in first.payload)
    if kinds == (FeatureKind.ATOMIC, FeatureKind.SET):
        return first.payload in second.payload
    if kinds == (FeatureKind.SET, FeatureKind.ATOMIC):
        return second.payload in first.payload
    if kinds == (FeatureKind.COMPLEX, FeatureKind.COMPLEX):
        return first.payload.unifies_with(second.payload)
    if FeatureKind.VARIABLE in kinds:
        return True
    return False


def unify_values(first: FeatureValue, second: FeatureValue) -> FeatureValue | None:
    """Return the unified value of two feature values, or None on a clash."""
    kinds = (first.kind, second.kind)
    if first.kind is FeatureKind.UNSPECIFIED:
        return second
    if second.kind is FeatureKind.UNSPECIFIED:
        return first
    if kinds == (FeatureKind.ATOMIC, FeatureKind.ATOMIC):
        return first if first.payload == second.payload else None
    if kinds == (FeatureKind.SET, FeatureKind.SET):
        common = [item for item in first.payload if item in second.payload]
        return FeatureValue.set_of(common) if common else None
    if kinds == (FeatureKind.ATOMIC, FeatureKind.SET):
        return FeatureValue.atomic(first.payload) if first.payload in second.payload else None
    if kinds == (FeatureKind.SET, FeatureKind.ATOMIC):
        return FeatureValue.atomic(second.payload) if second.payload in first.payload else None
    if kinds == (FeatureKind.COMPLEX, FeatureKind.COMPLEX):
        unified = first.payload.unify(second.payload)
        return None if unified is None else FeatureValue.complex(unified)
    if first.kind is FeatureKind.VARIABLE:
        return second
    if second.kind is FeatureKind.VARIABLE:
        return first
    return None


@dataclass
class FeatureRegistry:
    """Registered feature dimensions and their permitted values."""

    features: dict = field(default_factory=dict)

    def register_feature(self, name: str, values: Iterable[str]) -> None:
        self.features[name] = frozenset(values)

    def is_feature_registered(self, name: str) -> bool:
        return name in self.features

    def is_value_valid(self, name: str, value: str) -> bool:
        return value in self.features.get(name, frozenset())

    def get_values(self, name: str) -> list | None:
        """Permitted values for a feature, sorted, or None if unregistered."""
        values = self.features.get(name)
        return None if values is None else sorted(values)