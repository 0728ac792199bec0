"""Interfaces shared by the grammar formalisms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional

from nlgrammar.features import FeatureStructure


class Category(ABC):
    """A grammatical category that can be unified with another."""

    @abstractmethod
    def unify(self, other: Category) -> Optional[Category]:
        """Return the unification with ``other``, or None if they clash."""

    @abstractmethod
    def is_atomic(self) -> bool:
        """True for primitive categories."""

    @abstractmethod
    def atomic_name(self) -> Optional[str]:
        """The name of an atomic category, or None for complex ones."""


class GrammarFeature(ABC):
    """A named feature of a grammatical system."""

    name: str

    @abstractmethod
    def matches(self, other: GrammarFeature) -> bool:
        """True if this feature is compatible with ``other``."""


class ParseNode:
    """A node of a parse tree.

    Subclasses provide ``category``, ``word``, ``children`` and ``rule``.
    """

    category: Any
    word: Optional[str]
    children: list
    rule: Optional[str]

    def is_leaf(self) -> bool:
        return not self.children

    def node_features(self) -> Optional[FeatureStructure]:
        """Extra annotations carried by the node; none by default."""
        return None


class Parser(ABC):
    """A parser for one grammar formalism."""

    @abstractmethod
    def parse(self, sentence: str) -> Optional[ParseNode]:
        """Return a parse tree for ``sentence``, or None if there is none."""

    @abstractmethod
    def add_to_lexicon(self, word: str, category: Category) -> None:
        """Give ``word`` the category ``category``."""

    @abstractmethod
    def create_category_with_features(
        self, name: str, features: Iterable[tuple[str, str]]
    ) -> Category:
        """Build a category from registered type and feature names."""

    def parse_all(self, sentence: str) -> list[ParseNode]:
        """All parses of ``sentence``; by default the single one ``parse`` finds."""
        tree = self.parse(sentence)
        return [] if tree is None else [tree]