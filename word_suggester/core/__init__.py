"""
word_suggester.core

The engine behind the suggester.
Contains:
 - the vocabulary prefix tree (Trie)
 - the bounded top-K collector shared by both query paths (SuggestionRanker)
 - Levenshtein spell correction (edit_distance, query_by_edit_distance)
 - the facade tying them together (Suggester)
"""

from .trie import Trie, TrieNode
from .ranker import Suggestion, SuggestionRanker
from .fuzzy import edit_distance, query_by_edit_distance
from .suggester import Suggester, SuggestionResult, query_by_prefix

__all__ = [
    "Trie",
    "TrieNode",
    "Suggestion",
    "SuggestionRanker",
    "edit_distance",
    "query_by_edit_distance",
    "query_by_prefix",
    "Suggester",
    "SuggestionResult",
]
