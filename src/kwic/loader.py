"""
Document loading for the keyword-in-context engine.

The index works on decoded text only. This module is the one place that
touches the filesystem: it reads a whole file into a string and turns every
way that can fail into a DocumentLoadError, so a failed load never leaves a
half-built searcher behind.
"""

# src/kwic/loader.py
from __future__ import annotations
import os
from pathlib import Path
from typing import Union

from .config import ENCODING, ENCODING_ERRORS

PathLike = Union[str, "os.PathLike[str]"]


class DocumentLoadError(OSError):
    """The document text could not be obtained (missing, unreadable, undecodable)."""

    def __init__(self, path: PathLike, reason: str) -> None:
        super().__init__(f"cannot load {os.fspath(path)!s}: {reason}")
        self.path = os.fspath(path)
        self.reason = reason


def load_document(path: PathLike, *, encoding: str = ENCODING,
                  errors: str = ENCODING_ERRORS) -> str:
    """
    Read the complete contents of `path` as one string.

    Line endings are kept exactly as stored (no newline translation), so
    character offsets in the index match the file.

    Raises:
        DocumentLoadError: if the path is missing, is a directory, cannot be
            read, or is not valid text in `encoding`.
    """
    p = Path(path)
    try:
        with p.open("r", encoding=encoding, errors=errors, newline="") as f:
            return f.read()
    except FileNotFoundError as exc:
        raise DocumentLoadError(p, "no such file") from exc
    except IsADirectoryError as exc:
        raise DocumentLoadError(p, "is a directory") from exc
    except UnicodeDecodeError as exc:
        raise DocumentLoadError(p, f"not valid {encoding} text ({exc.reason})") from exc
    except OSError as exc:
        raise DocumentLoadError(p, exc.strerror or str(exc)) from exc
