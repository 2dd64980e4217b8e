from pathlib import Path
import logging
import pytest
from kwic import TextSearcher, DocumentLoadError, load_document


def _seed(tmp: Path, text: str, name: str = "hamlet.txt") -> Path:
    p = tmp / name
    p.write_text(text, encoding="utf-8", newline="")
    return p


@pytest.mark.e2e
def test_build_from_file_and_search(tmp_path: Path):
    path = _seed(tmp_path,
                 "To be, or not to be: that is the question.\n"
                 "Whether 'tis nobler in the mind to suffer.\n")
    ts = TextSearcher.from_file(path)
    assert ts.word_count == 18
    assert ts.search("to", 1) == ["To be", "not to be", "mind to suffer.\n"]
    assert ts.search("'tis", 1) == ["Whether 'tis nobler"]
    assert ts.count("BE") == 2


@pytest.mark.e2e
def test_crlf_line_endings_are_preserved(tmp_path: Path):
    path = _seed(tmp_path, "first line\r\nsecond line\r\n")
    assert load_document(path) == "first line\r\nsecond line\r\n"
    ts = TextSearcher.from_file(path)
    assert ts.search("line", 1) == ["first line\r\nsecond", "second line\r\n"]


@pytest.mark.e2e
def test_missing_file_raises_load_error(tmp_path: Path):
    with pytest.raises(DocumentLoadError) as ei:
        TextSearcher.from_file(tmp_path / "nope.txt")
    assert isinstance(ei.value, OSError)
    assert isinstance(ei.value.__cause__, FileNotFoundError)
    assert ei.value.path.endswith("nope.txt")


@pytest.mark.e2e
def test_directory_raises_load_error(tmp_path: Path):
    with pytest.raises(DocumentLoadError):
        TextSearcher.from_file(tmp_path)


@pytest.mark.e2e
def test_undecodable_file_raises_load_error(tmp_path: Path):
    p = tmp_path / "latin1.txt"
    p.write_bytes("caf\xe9 au lait".encode("latin-1"))
    with pytest.raises(DocumentLoadError) as ei:
        TextSearcher.from_file(p)
    assert isinstance(ei.value.__cause__, UnicodeDecodeError)
    # same file reads fine when the right encoding is given
    ts = TextSearcher.from_file(p, encoding="latin-1")
    assert ts.search("au", 1) == ["caf\xe9 au lait"]


@pytest.mark.e2e
def test_empty_file(tmp_path: Path):
    ts = TextSearcher.from_file(_seed(tmp_path, ""))
    assert ts.word_count == 0
    assert ts.search("anything", 3) == []


@pytest.mark.e2e
def test_build_logs_word_count(tmp_path: Path, caplog):
    path = _seed(tmp_path, "one two three")
    with caplog.at_level(logging.INFO, logger="kwic.engine"):
        TextSearcher.from_file(path)
    assert "Indexed 3 words" in caplog.text
    assert str(path) in caplog.text
