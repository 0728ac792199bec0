"""A lexicon mapping words to the categories they may take."""

from __future__ import annotations

from typing import Generic, Hashable, Iterator, TypeVar

C = TypeVar("C", bound=Hashable)


class Lexicon(Generic[C]):
    """Maps each word to a set of categories, kept in insertion order."""

    def __init__(self) -> None:
        self._entries: dict[str, dict[C, None]] = {}

    def add(self, word: str, category: C) -> None:
        """Give ``word`` another possible category; duplicates are ignored."""
        self._entries.setdefault(word, {})[category] = None

    def get_categories(self, word: str) -> list[C]:
        """All categories of ``word``, or an empty list for an unknown word."""
        return list(self._entries.get(word, ()))

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[str, tuple[C, ...]]]:
        """Yield ``(word, categories)`` pairs."""
        for word, categories in self._entries.items():
            yield word, tuple(categories)

    def words(self) -> list[str]:
        return list(self._entries)

    def remove(self, word: str) -> None:
        """Drop a word and all of its categories; unknown words are ignored."""
        self._entries.pop(word, None)

    def remove_category(self, word: str, category: C) -> None:
        """Drop one category of a word, and the word itself once it has none."""
        categories = self._entries.get(word)
        if categories is None:
            return
        categories.pop(category, None)
        if not categories:
            del self._entries[word]

    def clear(self) -> None:
        self._entries.clear()

    def has_category(self, word: str, category: C) -> bool:
        return category in self._entries.get(word, ())