from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence

from wordlefilter.engine.errors import DictionaryUnavailable, ResultsUnwritable

log = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises DictionaryUnavailable if the path doesn't exist or can't be read.
    """
    p = Path(p)
    if not p.is_file():
        raise DictionaryUnavailable(f"word file not found: {p}")
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryUnavailable(f"unable to read {p}: {e}") from e
    return [ln.rstrip("\r\n") for ln in text.splitlines()]


def load_dictionary(p: Path | str) -> List[str]:
    """
    Load a one-word-per-line dictionary: surrounding whitespace trimmed,
    blank lines dropped. Case is left as found; the filter lowercases.
    """
    words = [ln.strip() for ln in read_lines(p) if ln.strip()]
    log.info("Read %d words from %s", len(words), p)
    return words


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    Raises ResultsUnwritable if the file (or its directory) can't be written.
    """
    p = Path(p)
    lines = list(lines)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text("".join(f"{ln}\n" for ln in lines), encoding="utf-8")
    except OSError as e:
        raise ResultsUnwritable(f"unable to write {p}: {e}") from e
    return str(p)


def unique_words(
        paths: Sequence[Path | str],
        *,
        word_length: Optional[int] = None,
        expected_counts: Optional[Mapping[str, int]] = None,
) -> List[str]:
    """
    Merge several word files into one sorted, duplicate-free list.

    This is dictionary preprocessing, never part of the filter itself:
    callers opt in explicitly.

    Args:
      paths           : word files to merge (each one word per line)
      word_length     : keep only words of this length (None keeps all)
      expected_counts : optional {path: line count}; a mismatch is logged
                        as a warning but does not stop the merge

    Raises:
      DictionaryUnavailable if any file is missing.
    """
    expected_counts = expected_counts or {}
    merged = set()
    for path in paths:
        words = load_dictionary(path)
        expected = expected_counts.get(str(path))
        if expected is not None and expected != len(words):
            log.warning("Expected %d words in %s but found %d", expected, path, len(words))
        for w in words:
            w = w.strip().lower()
            if word_length is None or len(w) == word_length:
                merged.add(w)
    return sorted(merged)
