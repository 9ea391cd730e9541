# trie.py
# Prefix tree over lowercase ASCII words.
# Each terminal node keeps the word in its original casing plus a frequency
# weight, so prefix lookups can be ranked by popularity.

from __future__ import annotations

import logging
from string import ascii_lowercase
from typing import Dict, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

Word = str
Score = int
Entry = Tuple[Word, Score]

ALPHABET = frozenset(ascii_lowercase)


class TrieNode:
    """
    A single node in the Trie.
    children: lowercase letter -> TrieNode (at most 26, created lazily)
    is_word: True if the path from the root spells a stored word
    word: stored word in its original casing (None on inner nodes)
    freq: frequency weight of the stored word
    """

    __slots__ = ("children", "is_word", "word", "freq")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_word = False
        self.word: Optional[str] = None
        self.freq = 0


class Trie:
    """
    Trie used by the Suggester for:
     - prefix completion (find_node + collect_subtree)
     - building the flat word list for spell correction (words)
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0

    @property
    def root(self) -> TrieNode:
        return self._root

    # insertion -----------------------------------------------------
    def insert(self, word: str, freq: int = 0) -> None:
        """
        Insert a word with its frequency weight.

        The path is the lowercased word; the original casing is what gets
        stored. Re-inserting an existing word only replaces it when the new
        frequency is strictly greater, so on a tie the first entry wins.
        Empty or non-alphabetic words are ignored.
        """
        if not word:
            return

        path = word.lower()
        if not ALPHABET.issuperset(path):
            logger.debug("ignoring non-alphabetic word %r", word)
            return

        node = self._root
        for ch in path:
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = node.children[ch] = TrieNode()
            node = nxt

        if not node.is_word:
            node.is_word = True
            node.word = word
            node.freq = freq
            self._size += 1
        elif freq > node.freq:
            logger.debug("updating %r: %d -> %r: %d", node.word, node.freq, word, freq)
            node.word = word
            node.freq = freq

    # search/traversal ---------------------------------------------------------
    def find_node(self, prefix: str) -> Optional[TrieNode]:
        """Return the node spelling `prefix`, or None if no word starts with it."""
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def collect_subtree(self, node: TrieNode) -> Iterator[Entry]:
        """
        Yield (word, freq) for every stored word at or below `node`.
        Depth-first, children visited a..z, so the order is deterministic.
        """
        stack = [node]
        while stack:
            n = stack.pop()
            if n.is_word:
                yield (n.word, n.freq)
            # push in reverse so 'a' is popped first
            for ch in sorted(n.children, reverse=True):
                stack.append(n.children[ch])

    # convenience -----------------------------------------------------
    def words(self) -> List[Entry]:
        """All stored (word, freq) pairs in trie order."""
        return list(self.collect_subtree(self._root))

    def get(self, word: str) -> Optional[Entry]:
        node = self.find_node(word.lower()) if word else None
        if node is None or not node.is_word:
            return None
        return (node.word, node.freq)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: str) -> bool:
        """Case-insensitive membership check."""
        return self.get(word) is not None
