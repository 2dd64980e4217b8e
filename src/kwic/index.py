"""
Index module for keyword-in-context search.

This module turns a document into a WordIndex in a single left-to-right pass
over the tokenizer's output. Each word token gets the next occurrence rank,
its character range is appended to the span table, and its rank is appended
to the bucket of its hash. Gap tokens only advance the running offset.
"""

from __future__ import annotations
from collections import defaultdict
from types import MappingProxyType
from typing import Dict, Iterable, List, Optional

from .config import WORD_PATTERN
from .hashing import DEFAULT_HASHER, Hasher
from .models import Span, Token, WordIndex
from .tokenizer import Pattern, tokenize


def index_tokens(document: str, tokens: Iterable[Token],
                 hasher: Optional[Hasher] = None) -> WordIndex:
    """
    Build a WordIndex from an already tokenized document.

    Args:
        document (str): The text the tokens were cut from.
        tokens (Iterable[Token]): Gap-free token stream covering `document`.
        hasher (callable, optional): Word -> int key. Defaults to the shared
            polynomial hasher.

    Returns:
        WordIndex: frozen index whose buckets hold ranks in ascending order.

    Raises:
        ValueError: if the tokens do not add up to the length of `document`.
    """
    hasher = hasher or DEFAULT_HASHER

    # Use defaultdict for efficient list creation during building
    buckets: Dict[int, List[int]] = defaultdict(list)
    spans: List[Span] = []

    offset = 0
    for tok in tokens:
        end = offset + tok.length
        if tok.is_word:
            rank = len(spans)
            buckets[hasher(tok.text)].append(rank)
            spans.append(Span(offset, end))
        offset = end

    if offset != len(document):
        raise ValueError(
            f"token stream covers {offset} characters, document has {len(document)}"
        )

    # Freeze: tuples for the rank lists, a read-only view over the mapping
    frozen = {key: tuple(ranks) for key, ranks in buckets.items()}
    return WordIndex(
        document=document,
        buckets=MappingProxyType(frozen),
        spans=tuple(spans),
    )


def build_index(document: str, *, pattern: Pattern = WORD_PATTERN,
                hasher: Optional[Hasher] = None) -> WordIndex:
    """
    Tokenize `document` and index every word in it.

    Example:
        >>> idx = build_index("The cat. The hat.")
        >>> idx.word_count
        4
        >>> [idx.word_at(r) for r in range(idx.word_count)]
        ['The', 'cat', 'The', 'hat']
    """
    if not isinstance(document, str):
        raise TypeError(f"document must be str, not {type(document).__name__}")
    return index_tokens(document, tokenize(document, pattern), hasher)
