"""
Dictionary health report for wordle-filter.

What this module does:
- Inspect one word file for a target word length N.
- Count usable words, duplicates, and the lines that can never match
  (blank, wrong length, non a–z characters); compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

The filter doesn't need a clean file (it rejects bad lines on its own);
this report just tells the user what they are filtering.

Typical use:
    from wordlefilter.datasets import inspect_dictionary, pretty_summary
    rep = inspect_dictionary("wordlewords.txt", 5)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class DictionaryReport:
    """Per-file diagnostics and metadata."""
    path: str             # file path (as given)
    N: int                # target word length
    exists: bool          # did the file exist on disk?
    count: int            # words of length N (a–z only, case-insensitive)
    unique_count: int     # distinct words of length N
    blank_lines: int
    wrong_length: int     # non-blank lines whose length isn't N
    non_alpha: int        # length-N lines holding anything besides letters
    sha256: str           # SHA-256 of raw file bytes (empty string if missing)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


# -----------------------------
# Public API
# -----------------------------

def inspect_dictionary(path: str | Path, N: int) -> Dict:
    """
    Inspect a word file for length-N words.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see DictionaryReport). `passed` is
        True when the file exists and holds at least one usable word.
    """
    p = Path(path)
    if not p.is_file():
        rep = DictionaryReport(str(path), N, False, 0, 0, 0, 0, 0, "",
                               issues=[f"word file not found: {path}"])
        return asdict(rep)

    words: List[str] = []
    blank = wrong_len = non_alpha = 0
    with p.open("r", encoding="utf-8", errors="replace") as f:
        for raw in f:
            w = raw.strip().lower()
            if not w:
                blank += 1
            elif len(w) != N:
                wrong_len += 1
            elif not (w.isascii() and w.isalpha()):
                non_alpha += 1
            else:
                words.append(w)

    rep = DictionaryReport(
        path=str(p),
        N=N,
        exists=True,
        count=len(words),
        unique_count=len(set(words)),
        blank_lines=blank,
        wrong_length=wrong_len,
        non_alpha=non_alpha,
        sha256=_sha256_file(p),
    )

    if rep.count == 0:
        rep.issues.append(f"no {N}-letter words found")
    if rep.count != rep.unique_count:
        rep.issues.append(f"{rep.count - rep.unique_count} duplicate word(s)")
    if non_alpha:
        rep.issues.append(f"{non_alpha} line(s) with non-letter characters")

    rep.passed = rep.count > 0
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console output.

    Example:
        wordlewords.txt | N=5 | words=12972 (uniq=12972, sha=abc123...) | skipped=3021 | OK
    """
    skipped = report["blank_lines"] + report["wrong_length"] + report["non_alpha"]
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{report['path']} | N={report['N']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) | skipped={skipped} | {status}"
    )
