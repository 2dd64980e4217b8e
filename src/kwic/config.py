from __future__ import annotations
import os

# Word tokens: runs of ASCII letters, digits and apostrophes.
WORD_PATTERN: str = r"[a-zA-Z0-9']+[a-zA-Z0-9]*"

# Polynomial rolling hash
HASH_BASE: int = 53
HASH_MODULUS: int = 1_000_000_009
PRECOMPUTED_POWERS: int = 20     # base**0 .. base**19, longer words use pow()

# Document loading
ENCODING: str = "utf-8"
ENCODING_ERRORS: str = "strict"  # decode failures abort the build

# /* ~~~ words of context on each side when the caller does not say ~~~ */
DEFAULT_CONTEXT_WORDS: int = 0

# Progress logging (set KWIC_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("KWIC_VERBOSE") == "1"
