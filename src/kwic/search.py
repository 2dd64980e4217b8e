from __future__ import annotations
import logging
from typing import Iterator, List, Optional, Tuple

from .config import DEFAULT_CONTEXT_WORDS
from .hashing import DEFAULT_HASHER, Hasher
from .models import KwicHit, WordIndex

log = logging.getLogger(__name__)


def _candidates(index: WordIndex, query_word: str,
                hasher: Optional[Hasher]) -> Tuple[int, ...]:
    hasher = hasher or DEFAULT_HASHER
    return index.buckets.get(hasher(query_word), ())


def _matching_ranks(index: WordIndex, query_word: str,
                    candidates: Tuple[int, ...]) -> Iterator[int]:
    """
    /* ~~~ Ranks whose word really equals query_word, ignoring case.
       The hash bucket is only a candidate list; ranks whose text differs
       are collisions and are dropped here. ~~~ */
    """
    wanted = query_word.lower()
    for rank in candidates:
        if index.word_at(rank).lower() == wanted:
            yield rank
        else:
            log.debug("hash collision: %r vs %r at rank %d",
                      query_word, index.word_at(rank), rank)


def _window(index: WordIndex, rank: int, context_words: int) -> tuple[int, int]:
    start = max(rank - context_words, 0)
    end = min(rank + context_words, index.last_rank)
    return start, end


def find_hits(index: WordIndex, query_word: str,
              context_words: int = DEFAULT_CONTEXT_WORDS, *,
              hasher: Optional[Hasher] = None) -> List[KwicHit]:
    """
    Return one KwicHit per occurrence of query_word, in document order.

    Each hit's context runs from the word `context_words` ranks before the
    match to the word `context_words` ranks after it, clamped to the first
    and last word. A negative context_words is treated as 0.
    """
    k = max(int(context_words), 0)
    hits: List[KwicHit] = []
    candidates = _candidates(index, query_word, hasher)
    for rank in _matching_ranks(index, query_word, candidates):
        start, end = _window(index, rank, k)
        hits.append(KwicHit(
            rank=rank,
            span=index.spans[rank],
            context=index.text_between(start, end),
        ))
    log.debug("search %r (k=%d): %d candidates, %d matches",
              query_word, k, len(candidates), len(hits))
    return hits


def search(index: WordIndex, query_word: str,
           context_words: int = DEFAULT_CONTEXT_WORDS, *,
           hasher: Optional[Hasher] = None) -> List[str]:
    """
    Keyword-in-context lookup: one context string per occurrence.

        >>> from kwic.index import build_index
        >>> idx = build_index("The quick brown fox. The quick fox jumps.")
        >>> search(idx, "quick", 1)
        ['The quick brown', 'The quick fox']

    Unknown words give an empty list.
    """
    return [h.context for h in find_hits(index, query_word, context_words, hasher=hasher)]


def count(index: WordIndex, query_word: str, *,
          hasher: Optional[Hasher] = None) -> int:
    """Number of occurrences of query_word (case-insensitive)."""
    candidates = _candidates(index, query_word, hasher)
    return sum(1 for _ in _matching_ranks(index, query_word, candidates))
