"""word_suggester - trie-based word completion with spell correction."""

from word_suggester.core import (
    Suggester,
    SuggestionRanker,
    SuggestionResult,
    Trie,
    edit_distance,
    query_by_edit_distance,
    query_by_prefix,
)
from word_suggester.exceptions import InvalidInput, NoMatch, ResourceExhausted, SuggesterError

__all__ = [
    "Suggester",
    "SuggestionRanker",
    "SuggestionResult",
    "Trie",
    "edit_distance",
    "query_by_edit_distance",
    "query_by_prefix",
    "InvalidInput",
    "NoMatch",
    "ResourceExhausted",
    "SuggesterError",
]

__version__ = "0.1.0"
