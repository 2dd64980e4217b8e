# src/kwic/engine.py
from __future__ import annotations

import logging
from typing import List, Optional

from . import config as CFG
from .hashing import Hasher
from .index import build_index
from .loader import PathLike, load_document
from .models import KwicHit, WordIndex
from .search import count as count_matches, find_hits, search as search_index
from .tokenizer import Pattern

log = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    if verbose or CFG.VERBOSE:
        logging.basicConfig(level=logging.INFO)


class TextSearcher:
    """
    Thin orchestration layer over one indexed document:
      - document acquisition (loader.load_document) for file-backed builds,
      - single-pass indexing (index.build_index),
      - lookups (search.search / search.find_hits / search.count).

    A TextSearcher is complete as soon as it exists: construct it with
    from_text() or from_file(). Nothing about it changes afterwards, so one
    instance can serve searches from any number of threads.

    Public API:
      * from_text(text): index a string that is already in memory
      * from_file(path): read a file, then index it
      * search(word, context_words): one context string per occurrence
      * find_hits(word, context_words): same, with rank and span per hit
      * count(word): number of occurrences
    """

    __slots__ = ("_index", "_hasher")

    def __init__(self, index: WordIndex, *, hasher: Optional[Hasher] = None) -> None:
        self._index = index
        self._hasher = hasher

    # ------------- construction -------------

    # /* ~~~ Index a document that is already decoded ~~~ */
    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        pattern: Pattern = CFG.WORD_PATTERN,
        hasher: Optional[Hasher] = None,
        verbose: bool = False,
    ) -> "TextSearcher":
        _configure_logging(verbose)
        idx = build_index(text, pattern=pattern, hasher=hasher)
        log.info("Indexed %d words (%d distinct keys, %d characters)",
                 idx.word_count, len(idx.buckets), len(idx.document))
        return cls(idx, hasher=hasher)

    # /* ~~~ Load a file and index it; a failed load raises before any index exists ~~~ */
    @classmethod
    def from_file(
        cls,
        path: PathLike,
        *,
        encoding: str = CFG.ENCODING,
        errors: str = CFG.ENCODING_ERRORS,
        pattern: Pattern = CFG.WORD_PATTERN,
        hasher: Optional[Hasher] = None,
        verbose: bool = False,
    ) -> "TextSearcher":
        _configure_logging(verbose)
        log.info("Loading document from %s", path)
        text = load_document(path, encoding=encoding, errors=errors)
        return cls.from_text(text, pattern=pattern, hasher=hasher)

    # ------------- query -------------

    def search(self, query_word: str, context_words: int = CFG.DEFAULT_CONTEXT_WORDS) -> List[str]:
        return search_index(self._index, query_word, context_words, hasher=self._hasher)

    def find_hits(self, query_word: str,
                  context_words: int = CFG.DEFAULT_CONTEXT_WORDS) -> List[KwicHit]:
        return find_hits(self._index, query_word, context_words, hasher=self._hasher)

    def count(self, query_word: str) -> int:
        return count_matches(self._index, query_word, hasher=self._hasher)

    # ------------- introspection -------------

    @property
    def index(self) -> WordIndex:
        return self._index

    @property
    def word_count(self) -> int:
        return self._index.word_count

    def __repr__(self) -> str:
        return f"TextSearcher(words={self.word_count}, chars={len(self._index.document)})"
