# fuzzy.py
# Spell correction over a flat word list.
# - edit_distance: classic Levenshtein (insert/delete/substitute, unit cost)
#   over two rolling rows, with an optional early-exit cutoff.
# - query_by_edit_distance: score every dictionary word against the token and
#   keep the closest ones in a SuggestionRanker.

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple, Union

from word_suggester.core.ranker import DEFAULT_CAPACITY, SuggestionRanker
from word_suggester.exceptions import ResourceExhausted

logger = logging.getLogger(__name__)

DEFAULT_MAX_DISTANCE = 2

DictionaryItem = Union[str, Tuple[str, int]]
Correction = Tuple[str, int]


def edit_distance(a: str, b: str, max_distance: Optional[int] = None) -> int:
    """
    Levenshtein distance between a and b.
    Working memory is two rows of len(b) + 1 ints.
    With max_distance set, returns max_distance + 1 as soon as the real
    distance is known to exceed it (the exact value is then not computed).
    Raises ResourceExhausted if the rows cannot be allocated.
    """
    if a == b:
        return 0

    la, lb = len(a), len(b)
    if max_distance is not None and abs(la - lb) > max_distance:
        return max_distance + 1

    try:
        prev = list(range(lb + 1))
        curr = [0] * (lb + 1)
    except MemoryError as e:
        raise ResourceExhausted(
            f"cannot allocate edit distance rows for {la}x{lb} comparison"
        ) from e

    for i in range(1, la + 1):
        ca = a[i - 1]
        curr[0] = i
        row_min = i
        for j in range(1, lb + 1):
            delete = prev[j] + 1
            insert = curr[j - 1] + 1
            replace = prev[j - 1] + (0 if ca == b[j - 1] else 1)
            val = delete if delete < insert else insert
            if replace < val:
                val = replace
            curr[j] = val
            if val < row_min:
                row_min = val

        if max_distance is not None and row_min > max_distance:
            return max_distance + 1
        prev, curr = curr, prev

    return prev[lb]


def _word_of(item: DictionaryItem) -> str:
    return item if isinstance(item, str) else item[0]


def query_by_edit_distance(
    token: str,
    dictionary: Iterable[DictionaryItem],
    max_distance: int = DEFAULT_MAX_DISTANCE,
    limit: int = DEFAULT_CAPACITY,
) -> List[Correction]:
    """
    Return up to `limit` (word, distance) pairs within max_distance of token,
    closest first. Dictionary items may be plain words or (word, freq) pairs;
    frequency plays no part in spell correction.
    """
    q = token.lower()
    ranker = SuggestionRanker(limit)
    seen = 0
    for item in dictionary:
        word = _word_of(item)
        seen += 1
        d = edit_distance(q, word.lower(), max_distance)
        if d <= max_distance:
            ranker.offer(word, d, 0)

    out = [(s.word, s.distance) for s in ranker.drain_sorted()]
    logger.debug("correction %r: %d candidates from %d words", token, len(out), seen)
    return out
