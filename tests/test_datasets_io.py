import logging
from pathlib import Path

import pytest
from wordlefilter.datasets import load_dictionary, read_lines, unique_words, write_lines
from wordlefilter.engine import DictionaryUnavailable, ResultsUnwritable


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_read_lines_strips_line_endings(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_bytes(b"crane\r\nslate\n\nadieu")
    assert read_lines(p) == ["crane", "slate", "", "adieu"]


def test_load_dictionary_trims_and_drops_blanks(tmp_path: Path):
    p = tmp_path / "w.txt"
    _write(p, ["crane", "", "   ", " Slate\t"])
    assert load_dictionary(p) == ["crane", "Slate"]


def test_missing_dictionary_raises(tmp_path: Path):
    with pytest.raises(DictionaryUnavailable):
        load_dictionary(tmp_path / "nope.txt")
    # still an OSError for callers that only know the builtin
    with pytest.raises(OSError):
        read_lines(tmp_path / "nope.txt")


def test_directory_is_not_a_dictionary(tmp_path: Path):
    with pytest.raises(DictionaryUnavailable):
        read_lines(tmp_path)


def test_undecodable_dictionary_raises(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_bytes(b"\xff\xfe")
    with pytest.raises(DictionaryUnavailable):
        read_lines(p)


def test_write_lines_round_trip(tmp_path: Path):
    p = tmp_path / "out" / "results.txt"
    written = write_lines(["apple", "crane"], p)
    assert written == str(p)
    assert p.read_text(encoding="utf-8") == "apple\ncrane\n"


def test_write_lines_into_directory_raises(tmp_path: Path):
    with pytest.raises(ResultsUnwritable):
        write_lines(["apple"], tmp_path)


def test_unique_words_merges_sorts_and_dedupes(tmp_path: Path):
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    _write(a, ["Slate", "crane", "crane", "cranes"])
    _write(b, ["adieu", "CRANE", "slate"])
    assert unique_words([a, b], word_length=5) == ["adieu", "crane", "slate"]
    assert unique_words([a]) == ["crane", "cranes", "slate"]


def test_unique_words_warns_on_unexpected_count(tmp_path: Path, caplog):
    a = tmp_path / "a.txt"
    _write(a, ["crane", "slate"])
    with caplog.at_level(logging.WARNING):
        unique_words([a], expected_counts={str(a): 3})
    assert "Expected 3 words" in caplog.text


def test_unique_words_missing_file(tmp_path: Path):
    with pytest.raises(DictionaryUnavailable):
        unique_words([tmp_path / "missing.txt"])
