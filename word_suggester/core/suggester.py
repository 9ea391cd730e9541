# suggester.py
"""
Suggester - application facade over the trie, ranker and spell corrector.

Purpose:
 - Own the Trie and the flat dictionary snapshot used for spell correction
 - Simple public API for the CLI/tests:
     insert(word, freq), load(entries), complete(prefix), correct(token),
     suggest(text), build_dictionary_snapshot(sort)
 - suggest() is the orchestration point: prefix completion first, spell
   correction when no stored word has the prefix

The snapshot is rebuilt only by refresh_dictionary() (load() calls it once).
Words inserted one at a time afterwards are visible to completion right away
but not to correction until the next refresh.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Literal, Tuple

from word_suggester.core.fuzzy import DEFAULT_MAX_DISTANCE, query_by_edit_distance
from word_suggester.core.ranker import DEFAULT_CAPACITY, SuggestionRanker
from word_suggester.core.trie import Entry, Trie
from word_suggester.exceptions import NoMatch

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORD_LENGTH = 100


def query_by_prefix(trie: Trie, prefix: str, limit: int = DEFAULT_CAPACITY) -> List[Entry]:
    """
    Return up to `limit` (word, freq) pairs for words starting with prefix,
    highest frequency first. Raises NoMatch when no word has the prefix.
    """
    node = trie.find_node(prefix.lower())
    if node is None:
        raise NoMatch(prefix)

    ranker = SuggestionRanker(limit)
    for word, freq in trie.collect_subtree(node):
        ranker.offer(word, 0, freq)
    return [(s.word, s.frequency) for s in ranker.drain_sorted()]


@dataclass
class SuggestionResult:
    """
    kind: "prefix" -> items are (word, frequency)
          "fuzzy"  -> items are (word, distance), possibly empty
    """

    kind: Literal["prefix", "fuzzy"]
    query: str
    items: List[Tuple[str, int]] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.items)


class Suggester:
    """Word completion with spell-correction fallback.
    Public API:
      - insert(word, freq=0) -> None
      - load(entries) -> int
      - complete(prefix) -> [(word, freq)]   (raises NoMatch)
      - correct(token) -> [(word, distance)]
      - suggest(text) -> SuggestionResult
      - build_dictionary_snapshot(sort=False) -> [(word, freq)]
    """

    def __init__(
        self,
        max_suggestions: int = DEFAULT_CAPACITY,
        max_distance: int = DEFAULT_MAX_DISTANCE,
        max_word_length: int = DEFAULT_MAX_WORD_LENGTH,
    ) -> None:
        if max_suggestions < 1:
            raise ValueError("max_suggestions must be >= 1")
        if max_distance < 0:
            raise ValueError("max_distance must be >= 0")
        self.max_suggestions = max_suggestions
        self.max_distance = max_distance
        self.max_word_length = max_word_length
        self.trie = Trie()
        self._dictionary: List[Entry] = []

    @classmethod
    def from_config(cls, cfg) -> "Suggester":
        return cls(
            max_suggestions=cfg.get("max_suggestions"),
            max_distance=cfg.get("max_distance"),
            max_word_length=cfg.get("max_word_length"),
        )

    # building ---------------------------------------------------------
    def insert(self, word: str, freq: int = 0) -> None:
        self.trie.insert(word, freq)

    def load(self, entries: Iterable[Tuple[str, int]]) -> int:
        """Bulk insert, then rebuild the dictionary snapshot. Returns word count."""
        for word, freq in entries:
            self.trie.insert(word, freq)
        self.refresh_dictionary()
        logger.info("loaded vocabulary: %d words", len(self.trie))
        return len(self.trie)

    def build_dictionary_snapshot(self, sort: bool = False) -> List[Entry]:
        """
        Flat list of every stored (word, freq).
        sort=True orders by word (plain string order, uppercase before
        lowercase); otherwise trie order.
        """
        snapshot = self.trie.words()
        if sort:
            snapshot.sort(key=lambda e: e[0])
        return snapshot

    def refresh_dictionary(self) -> None:
        self._dictionary = self.build_dictionary_snapshot()

    @property
    def dictionary(self) -> List[Entry]:
        return self._dictionary

    # queries ---------------------------------------------------------
    def complete(self, prefix: str) -> List[Entry]:
        return query_by_prefix(self.trie, prefix, self.max_suggestions)

    def correct(self, token: str) -> List[Tuple[str, int]]:
        return query_by_edit_distance(
            token, self._dictionary, self.max_distance, self.max_suggestions
        )

    def suggest(self, text: str) -> SuggestionResult:
        try:
            return SuggestionResult("prefix", text, self.complete(text))
        except NoMatch:
            logger.debug("no prefix match for %r, trying spell correction", text)
        return SuggestionResult("fuzzy", text, self.correct(text))

    def __len__(self) -> int:
        return len(self.trie)
