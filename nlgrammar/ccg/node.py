"""Parse tree nodes produced by the CCG parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from nlgrammar.base import ParseNode
from nlgrammar.ccg.category import CCGCategory


@dataclass
class CCGNode(ParseNode):
    """A node of a CCG derivation: a word leaf or a rule application."""

    category: CCGCategory
    word: Optional[str] = None
    children: list = field(default_factory=list)
    rule: Optional[str] = None

    @classmethod
    def leaf(cls, word: str, category: CCGCategory) -> CCGNode:
        return cls(category=category, word=word)

    @classmethod
    def internal(
        cls, category: CCGCategory, children: Iterable[CCGNode], rule: str
    ) -> CCGNode:
        return cls(category=category, children=list(children), rule=rule)

    def is_leaf(self) -> bool:
        return not self.children

    def _lines(self, indent: int):
        pad = " " * indent
        if self.word is not None:
            yield f"{pad}{self.word}[{self.category}]"
        elif self.rule is not None:
            yield f"{pad}{self.rule}[{self.category}]"
            for child in self.children:
                yield from child._lines(indent + 2)

    def __str__(self) -> str:
        return "".join(f"{line}\n" for line in self._lines(0))