# parsing.py - turn raw "word[:freq]" tokens into validated entries

from __future__ import annotations

import logging
import re
from typing import Iterable, Iterator, Tuple

from word_suggester.core.suggester import DEFAULT_MAX_WORD_LENGTH
from word_suggester.exceptions import InvalidInput

logger = logging.getLogger(__name__)

# optional whitespace, optional sign, leading digits; the rest is ignored
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_frequency(text: str) -> int:
    """
    Lenient integer parse: "12" -> 12, "7abc" -> 7, "abc" -> 0, "" -> 0.
    Negative values clamp to 0.
    """
    m = _LEADING_INT.match(text)
    if not m:
        return 0
    return max(0, int(m.group(1)))


def validate_word(text: str, max_word_length: int = DEFAULT_MAX_WORD_LENGTH) -> str:
    """Return text unchanged if it is a usable word, else raise InvalidInput."""
    if not text:
        raise InvalidInput("empty word")
    if len(text) >= max_word_length:
        raise InvalidInput(f"word longer than {max_word_length - 1} characters")
    if not (text.isascii() and text.isalpha()):
        raise InvalidInput(f"only letters allowed: {text!r}")
    return text


def parse_entry(token: str, max_word_length: int = DEFAULT_MAX_WORD_LENGTH) -> Tuple[str, int]:
    """Parse "word" or "word:freq" into (word, freq)."""
    word, sep, freq_text = token.strip().partition(":")
    freq = parse_frequency(freq_text) if sep else 0
    return validate_word(word, max_word_length), freq


def read_entries(
    lines: Iterable[str], max_word_length: int = DEFAULT_MAX_WORD_LENGTH
) -> Iterator[Tuple[str, int]]:
    """Yield entries from whitespace separated tokens, skipping invalid ones."""
    for lineno, line in enumerate(lines, start=1):
        for token in line.split():
            try:
                yield parse_entry(token, max_word_length)
            except InvalidInput as e:
                logger.warning("line %d: skipping %r (%s)", lineno, token, e)
