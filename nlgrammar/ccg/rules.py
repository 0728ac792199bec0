"""Combinatory rules that combine adjacent CCG derivations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, Optional

from nlgrammar.ccg.category import Backward, CCGCategory, Forward
from nlgrammar.ccg.node import CCGNode


def _matches(expected: CCGCategory, actual: CCGCategory, use_features: bool) -> bool:
    """Compare two categories by unification or by plain equality."""
    if use_features:
        return expected.unify(actual) is not None
    return expected == actual


class CCGRule(ABC):
    """A combinatory rule deriving a new node from two adjacent nodes."""

    name: ClassVar[str] = ""
    symbol: ClassVar[str] = ""

    @abstractmethod
    def apply(
        self, left: CCGNode, right: CCGNode, use_features: bool
    ) -> Optional[CCGNode]:
        """Return the derived node, or None if the rule does not apply."""


class ForwardApplication(CCGRule):
    """Forward application: ``X/Y  Y  =>  X``."""

    name: ClassVar[str] = "Forward Application"
    symbol: ClassVar[str] = ">"

    def apply(
        self, left: CCGNode, right: CCGNode, use_features: bool
    ) -> Optional[CCGNode]:
        functor = left.category
        if isinstance(functor, Forward) and _matches(
            functor.argument, right.category, use_features
        ):
            return CCGNode.internal(functor.result, [left, right], self.symbol)
        return None


class BackwardApplication(CCGRule):
    """Backward application: ``Y  X\\Y  =>  X``."""

    name: ClassVar[str] = "Backward Application"
    symbol: ClassVar[str] = "<"

    def apply(
        self, left: CCGNode, right: CCGNode, use_features: bool
    ) -> Optional[CCGNode]:
        functor = right.category
        if isinstance(functor, Backward) and _matches(
            functor.argument, left.category, use_features
        ):
            return CCGNode.internal(functor.result, [left, right], self.symbol)
        return None


class ForwardComposition(CCGRule):
    """Forward composition: ``X/Y  Y/Z  =>  X/Z``."""

    name: ClassVar[str] = "Forward Composition"
    symbol: ClassVar[str] = ">B"

    def apply(
        self, left: CCGNode, right: CCGNode, use_features: bool
    ) -> Optional[CCGNode]:
        outer, inner = left.category, right.category
        if (
            isinstance(outer, Forward)
            and isinstance(inner, Forward)
            and _matches(outer.argument, inner.result, use_features)
        ):
            composed = Forward(outer.result, inner.argument)
            return CCGNode.internal(composed, [left, right], self.symbol)
        return None


class BackwardComposition(CCGRule):
    """Backward composition: ``Y\\Z  X\\Y  =>  X\\Z``."""

    name: ClassVar[str] = "Backward Composition"
    symbol: ClassVar[str] = "<B"

    def apply(
        self, left: CCGNode, right: CCGNode, use_features: bool
    ) -> Optional[CCGNode]:
        inner, outer = left.category, right.category
        if (
            isinstance(outer, Backward)
            and isinstance(inner, Backward)
            and _matches(outer.argument, inner.result, use_features)
        ):
            composed = Backward(outer.result, inner.argument)
            return CCGNode.internal(composed, [left, right], self.symbol)
        return None


@dataclass
class ForwardTypeRaising(CCGRule):
    """Forward type raising: ``X  =>  T/(T\\X)`` for the first target ``T``.

    Only the left node is raised; the right node is ignored.
    """

    targets: list = field(default_factory=list)

    name: ClassVar[str] = "Forward Type Raising"
    symbol: ClassVar[str] = ">T"

    def apply(
        self, left: CCGNode, right: CCGNode, use_features: bool
    ) -> Optional[CCGNode]:
        for target in self.targets:
            raised = Forward(target, Backward(target, left.category))
            return CCGNode.internal(raised, [left], self.symbol)
        return None


@dataclass
class BackwardTypeRaising(CCGRule):
    """Backward type raising: ``X  =>  T\\(T/X)`` for the first target ``T``.

    Only the left node is raised; the right node is ignored.
    """

    targets: list = field(default_factory=list)

    name: ClassVar[str] = "Backward Type Raising"
    symbol: ClassVar[str] = "<T"

    def apply(
        self, left: CCGNode, right: CCGNode, use_features: bool
    ) -> Optional[CCGNode]:
        for target in self.targets:
            raised = Backward(target, Forward(target, left.category))
            return CCGNode.internal(raised, [left], self.symbol)
        return None


def extract_category_chain(
    category: CCGCategory, depth: int, max_depth: int
) -> Optional[tuple[CCGCategory, list[tuple[bool, CCGCategory]]]]:
    """Split a functor into its result and its slashed arguments.

    Returns ``(result, [(is_forward, argument), ...])``, or None when the
    category is atomic or ``depth`` has reached ``max_depth``.  At depth 0
    only the outermost slash is taken.
    """
    if depth >= max_depth:
        return None
    if not isinstance(category, (Forward, Backward)):
        return None
    is_forward = isinstance(category, Forward)
    if depth == 0:
        return category.result, [(is_forward, category.argument)]
    inner = extract_category_chain(category.result, depth + 1, max_depth)
    if inner is None:
        return None
    base, arguments = inner
    arguments.append((is_forward, category.argument))
    return base, arguments