"""
Keyword-in-Context Search Module

This module indexes a single text document in memory and answers
keyword-in-context queries against it: for a query word and a context width
k, it returns every occurrence of the word together with k words on each
side, cut verbatim from the document.

The module is designed with a clean separation of concerns:
- Tokenization into word and gap tokens
- Polynomial hashing of lowercased words
- A one-pass index builder producing a frozen WordIndex
- Search with exact (case-insensitive) verification of hash candidates

Main Entry Points:
    TextSearcher.from_file(path): Load a document from disk and index it
    TextSearcher.from_text(text): Index a document already in memory
    TextSearcher.search(word, context_words): Context strings per occurrence

Example Usage:
    from kwic import TextSearcher

    searcher = TextSearcher.from_text("The quick brown fox. The quick fox jumps.")
    searcher.search("quick", 1)
    # ['The quick brown', 'The quick fox']
"""

# src/kwic/__init__.py
from .engine import TextSearcher
from .hashing import PolynomialHasher, word_hash
from .index import build_index, index_tokens
from .loader import DocumentLoadError, load_document
from .models import KwicHit, Span, Token, WordIndex
from .search import count, find_hits
from .tokenizer import tokenize

__version__ = "1.0.0"
__all__ = [
    "TextSearcher",
    "PolynomialHasher",
    "word_hash",
    "build_index",
    "index_tokens",
    "DocumentLoadError",
    "load_document",
    "KwicHit",
    "Span",
    "Token",
    "WordIndex",
    "count",
    "find_hits",
    "tokenize",
]
