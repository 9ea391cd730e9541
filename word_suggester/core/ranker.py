# word_suggester/core/ranker.py
"""
SuggestionRanker - bounded top-K collector shared by both query paths.

Ordering:
 - lower edit distance first
 - higher frequency second
 - anything beyond that is unordered

Admission policy:
 - below capacity every candidate is kept
 - at capacity the single worst held entry is located and replaced only if the
   new candidate ranks strictly better than it
 - this is approximate under ties (a candidate tied with the worst entry is
   dropped), but drain_sorted() always returns entries in ranking order
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

DEFAULT_CAPACITY = 10


@dataclass(frozen=True, slots=True)
class Suggestion:
    """One candidate produced during a query."""

    word: str
    distance: int
    frequency: int

    def sort_key(self) -> Tuple[int, int]:
        return (self.distance, -self.frequency)

    def beats(self, other: "Suggestion") -> bool:
        """True if self ranks strictly better than other."""
        return self.distance < other.distance or (
            self.distance == other.distance and self.frequency > other.frequency
        )


class SuggestionRanker:
    """Keep the `capacity` best suggestions offered so far."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._items: List[Suggestion] = []

    def offer(self, word: str, distance: int, frequency: int = 0) -> bool:
        """Offer a candidate. Returns True if it was kept."""
        cand = Suggestion(word, distance, frequency)
        if len(self._items) < self.capacity:
            self._items.append(cand)
            return True

        worst_idx = self._worst_index()
        if cand.beats(self._items[worst_idx]):
            self._items[worst_idx] = cand
            return True
        return False

    def offer_many(self, candidates: Iterable[Tuple[str, int, int]]) -> None:
        for word, distance, frequency in candidates:
            self.offer(word, distance, frequency)

    def _worst_index(self) -> int:
        # first entry with the largest distance, lowest frequency on ties
        worst = 0
        for i in range(1, len(self._items)):
            if self._items[worst].beats(self._items[i]):
                worst = i
        return worst

    def drain_sorted(self) -> List[Suggestion]:
        """Snapshot of held entries, best first. Does not clear the ranker."""
        return sorted(self._items, key=Suggestion.sort_key)

    def __len__(self) -> int:
        return len(self._items)
