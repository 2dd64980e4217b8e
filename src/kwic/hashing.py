from __future__ import annotations
from typing import Callable, List

from .config import HASH_BASE, HASH_MODULUS, PRECOMPUTED_POWERS

# Any word -> int key function can stand in for PolynomialHasher
Hasher = Callable[[str], int]


class PolynomialHasher:
    """
    Case-insensitive polynomial hash used as the word-index key.

        hash(w) = sum((ord(c) - ord('a') + 1) * base**i) mod modulus

    over the characters c of w.lower(), i counting from 0. Letters map to
    1..26; digits and apostrophes come out negative and are folded into
    [0, modulus) by the modulo. Collisions are expected: callers compare the
    real text before treating two words as equal.

    Powers below `precomputed` are tabulated once in __init__. Longer words
    use pow() for the remaining positions, so the table is never mutated and
    one hasher can be shared across threads.
    """

    def __init__(self, base: int = HASH_BASE, modulus: int = HASH_MODULUS,
                 precomputed: int = PRECOMPUTED_POWERS) -> None:
        if modulus <= 0:
            raise ValueError("modulus must be positive")
        self.base = base
        self.modulus = modulus
        powers: List[int] = [1 % modulus]
        for _ in range(1, max(1, precomputed)):
            powers.append((powers[-1] * base) % modulus)
        self._powers = tuple(powers)

    def power(self, i: int) -> int:
        """base**i mod modulus."""
        if i < len(self._powers):
            return self._powers[i]
        return pow(self.base, i, self.modulus)

    def __call__(self, word: str) -> int:
        m = self.modulus
        h = 0
        for i, ch in enumerate(word.lower()):
            h = (h + (ord(ch) - ord("a") + 1) * self.power(i)) % m
        return h

    def __repr__(self) -> str:
        return f"PolynomialHasher(base={self.base}, modulus={self.modulus})"


DEFAULT_HASHER = PolynomialHasher()


def word_hash(word: str) -> int:
    """Hash `word` with the default base/modulus."""
    return DEFAULT_HASHER(word)
