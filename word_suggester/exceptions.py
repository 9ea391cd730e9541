"""Exception hierarchy for the suggester.

InvalidInput is raised by the parsing layer before anything reaches the trie.
NoMatch is not a failure: it tells the caller that the prefix path does not
exist so it can fall back to spell correction.
"""

from __future__ import annotations


class SuggesterError(Exception):
    """Base exception for all suggester errors."""


class InvalidInput(SuggesterError, ValueError):
    """Empty word, non-alphabetic characters or an over-length token."""


class NoMatch(SuggesterError):
    """No stored word starts with the requested prefix."""

    def __init__(self, prefix: str) -> None:
        super().__init__(f"no words with prefix {prefix!r}")
        self.prefix = prefix


class ResourceExhausted(SuggesterError):
    """Edit distance could not be computed (out of memory)."""
