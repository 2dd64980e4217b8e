# src/kwic/models.py
"""
Data models for the keyword-in-context engine.

This module defines four small, focused value types:

- Token: one piece of the document as produced by the tokenizer.
- Span: the half-open character range of a word in the document.
- WordIndex: the frozen result of indexing a document.
- KwicHit: one match returned to callers who want more than the context text.

All of them are immutable. A WordIndex is assembled once by
index.build_index() and never changes afterwards, which is what makes it safe
to share between threads without locking.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Mapping, Tuple


@dataclass(frozen=True, slots=True)
class Token:
    """
    A run of document text, labelled as a word or as the gap between words.

    Attributes
    ----------
    text : str
        The exact characters of the run. Concatenating the text of every
        token in emitted order gives back the original document.
    is_word : bool
        True for a run matching the word pattern, False for the
        punctuation/whitespace run between two words.
    """
    text: str
    is_word: bool

    @property
    def length(self) -> int:
        return len(self.text)


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open character range [start, end) inside the document."""
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class WordIndex:
    """
    The searchable, read-only state built from one document.

    Attributes
    ----------
    document : str
        The full document text, exactly as supplied to the builder.
    buckets : Mapping[int, Tuple[int, ...]]
        Hash of a lowercased word -> ranks of every word with that hash, in
        ascending order. Distinct words may share a bucket; callers must
        compare the real text before trusting a rank.
    spans : Tuple[Span, ...]
        spans[r] is the character range of the word with rank r. Ranks are
        0, 1, 2, ... in reading order and spans never overlap.
    """
    document: str
    buckets: Mapping[int, Tuple[int, ...]]
    spans: Tuple[Span, ...]

    @property
    def word_count(self) -> int:
        return len(self.spans)

    @property
    def last_rank(self) -> int:
        return len(self.spans) - 1

    def word_at(self, rank: int) -> str:
        span = self.spans[rank]
        return self.document[span.start:span.end]

    def text_between(self, start_rank: int, end_rank: int) -> str:
        """
        Return the document text from the first character of start_rank to the
        last character of end_rank. When end_rank is the final word the text
        runs to the end of the document, so trailing punctuation is kept.
        """
        start = self.spans[start_rank].start
        if end_rank == self.last_rank:
            return self.document[start:]
        return self.document[start:self.spans[end_rank].end]


@dataclass(frozen=True, slots=True)  # frozen=True so results can be cached or shared
class KwicHit:
    """
    One occurrence of the query word together with its context.

    Attributes
    ----------
    rank : int
        Occurrence rank of the matched word.
    span : Span
        Character range of the matched word in the document.
    context : str
        The matched word plus the requested number of words on each side,
        cut from the document verbatim.
    """
    rank: int
    span: Span
    context: str
