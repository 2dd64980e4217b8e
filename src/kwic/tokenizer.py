from __future__ import annotations
import re
from typing import Iterator, Union

from .models import Token
from .config import WORD_PATTERN

Pattern = Union[str, "re.Pattern[str]"]

_DEFAULT_RE = re.compile(WORD_PATTERN)


def _compile(pattern: Pattern) -> re.Pattern:
    if isinstance(pattern, re.Pattern):
        return pattern
    if pattern == WORD_PATTERN:
        return _DEFAULT_RE
    return re.compile(pattern)


def tokenize(text: str, pattern: Pattern = WORD_PATTERN) -> Iterator[Token]:
    """
    Split text into word and non-word tokens, lazily, with no gaps.

    Every match of `pattern` becomes a word token; every run of characters
    between two matches (and before the first / after the last) becomes a
    non-word token. Joining all token texts reproduces `text` exactly.

        >>> [(t.text, t.is_word) for t in tokenize("Hi, you.")]
        [('Hi', True), (', ', False), ('you', True), ('.', False)]
    """
    word_re = _compile(pattern)
    pos = 0
    for m in word_re.finditer(text):
        start, end = m.span()
        if start == end:
            # a custom pattern may match the empty string; it never makes a word
            continue
        if start > pos:
            yield Token(text[pos:start], False)
        yield Token(text[start:end], True)
        pos = end
    if pos < len(text):
        yield Token(text[pos:], False)
