"""Categories of Combinatory Categorial Grammar."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional

from nlgrammar.base import Category
from nlgrammar.features import FeatureStructure, FeatureValue


class CCGCategory(Category):
    """A CCG category: atomic, or a functor with a forward or backward slash."""

    def unify(self, other: CCGCategory) -> Optional[CCGCategory]:
        """Return the unification with ``other``, or None if they clash."""
        raise NotImplementedError

    def is_atomic(self) -> bool:
        return False

    def atomic_name(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class Atomic(CCGCategory):
    """A primitive category such as ``S`` or ``NP``, with optional features."""

    name: str
    features: FeatureStructure = field(default_factory=FeatureStructure)

    def __hash__(self) -> int:
        # Features are left out so that categories differing only in features
        # land in the same bucket; equality still tells them apart.
        return hash((Atomic, self.name))

    def __str__(self) -> str:
        return f"{self.name}{self.features}" if self.features.features else self.name

    def unify(self, other: CCGCategory) -> Optional[CCGCategory]:
        if not isinstance(other, Atomic) or self.name != other.name:
            return None
        unified = self.features.unify(other.features)
        return None if unified is None else Atomic(self.name, unified)

    def is_atomic(self) -> bool:
        return True

    def atomic_name(self) -> Optional[str]:
        return self.name


@dataclass(frozen=True)
class _Slashed(CCGCategory):
    result: CCGCategory
    argument: CCGCategory

    slash: ClassVar[str] = ""

    def __str__(self) -> str:
        left = str(self.result) if self.result.is_atomic() else f"({self.result})"
        return f"{left}{self.slash}{self.argument}"

    def unify(self, other: CCGCategory) -> Optional[CCGCategory]:
        if type(other) is not type(self):
            return None
        result = self.result.unify(other.result)
        argument = self.argument.unify(other.argument)
        if result is None or argument is None:
            return None
        return type(self)(result, argument)


@dataclass(frozen=True)
class Forward(_Slashed):
    """A functor ``X/Y`` seeking its argument ``Y`` to the right."""

    slash: ClassVar[str] = "/"


@dataclass(frozen=True)
class Backward(_Slashed):
    """A functor ``X\\Y`` seeking its argument ``Y`` to the left."""

    slash: ClassVar[str] = "\\"


def atomic(name: str, features: Optional[FeatureStructure] = None) -> Atomic:
    """An atomic category, optionally carrying a copy of ``features``."""
    return Atomic(name, FeatureStructure() if features is None else features.copy())


def forward(result: CCGCategory, argument: CCGCategory) -> Forward:
    return Forward(result, argument)


def backward(result: CCGCategory, argument: CCGCategory) -> Backward:
    return Backward(result, argument)


def s() -> Atomic:
    return atomic("S")


def np() -> Atomic:
    return atomic("NP")


def n() -> Atomic:
    return atomic("N")


def n_with_number(number: str) -> Atomic:
    """A noun carrying a ``num`` feature."""
    return atomic("N", FeatureStructure.with_feature("num", FeatureValue.atomic(number)))


def np_with_features(case: str, number: str) -> Atomic:
    """A noun phrase carrying ``case`` and ``num`` features."""
    features = FeatureStructure()
    features.add("case", FeatureValue.atomic(case))
    features.add("num", FeatureValue.atomic(number))
    return atomic("NP", features)


def s_with_agreement(subject_num: str, subject_person: str) -> Atomic:
    """A sentence carrying the subject's number and person."""
    features = FeatureStructure()
    features.add("s_num", FeatureValue.atomic(subject_num))
    features.add("s_per", FeatureValue.atomic(subject_person))
    return atomic("S", features)