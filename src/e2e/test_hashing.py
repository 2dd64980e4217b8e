import pytest
from kwic.hashing import PolynomialHasher, word_hash, DEFAULT_HASHER

M = 1_000_000_009


def _reference(word: str, base: int = 53, mod: int = M) -> int:
    return sum((ord(c) - ord("a") + 1) * pow(base, i, mod) for i, c in enumerate(word.lower())) % mod


def test_letters_map_to_one_through_twenty_six():
    assert word_hash("a") == 1
    assert word_hash("z") == 26
    assert word_hash("ab") == 1 + 2 * 53


def test_case_insensitive():
    assert word_hash("Quick") == word_hash("quick") == word_hash("QUICK")


def test_digits_and_apostrophes_use_same_formula():
    assert word_hash("0") == (ord("0") - ord("a") + 1) % M
    assert word_hash("'") == M - 57
    assert word_hash("don't") == _reference("don't")


def test_empty_word_hashes_to_zero():
    assert word_hash("") == 0


def test_value_is_in_range():
    for w in ["a", "zzzzzzzzzz", "'''", "9" * 40]:
        assert 0 <= word_hash(w) < M


@pytest.mark.parametrize("length", [19, 20, 21, 64])
def test_long_words_are_not_truncated(length):
    word = ("abcdefghij" * 7)[:length]
    assert word_hash(word) == _reference(word)
    # a change in the last character must change the hash
    assert word_hash(word[:-1] + "z") != word_hash(word)


def test_power_table_and_on_demand_powers_agree():
    h = PolynomialHasher(precomputed=3)
    for i in range(30):
        assert h.power(i) == pow(53, i, M)
    assert h("supercalifragilistic") == DEFAULT_HASHER("supercalifragilistic")


def test_custom_modulus():
    h = PolynomialHasher(base=31, modulus=7)
    assert h("abc") == _reference("abc", base=31, mod=7)


def test_non_positive_modulus_rejected():
    with pytest.raises(ValueError):
        PolynomialHasher(modulus=0)


def test_hasher_alias_is_shared_across_modules():
    import kwic.engine, kwic.index, kwic.search
    from kwic.hashing import Hasher
    assert kwic.index.Hasher is Hasher
    assert kwic.search.Hasher is Hasher
    assert kwic.engine.Hasher is Hasher
