"""
Candidate filtering given what is known about the hidden word.

Given:
  - a pool of words (usually a whole dictionary file)
  - a Constraint: word length, required letters, excluded letters and
    letters already fixed at known positions

Return:
  - the words that satisfy ALL of the constraint's rules, in input order.

Two interchangeable matching strategies are provided:
  - "set"   : explicit per-letter set checks (see `matches`)
  - "regex" : one compiled pattern per constraint (see `build_pattern`)
They must agree on every input; the tests hold them to that.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Tuple

from .validation import validate_constraint

log = logging.getLogger(__name__)

# A known-position slot: a lowercase letter, or None when still unknown.
Slot = Optional[str]


@dataclass(frozen=True)
class Constraint:
    """
    Everything known about the hidden word.

    word_length : number of letters in the word (>= 2)
    required    : letters that appear somewhere, position unknown
    excluded    : letters that appear nowhere
    known       : one slot per position, a letter or None
    """
    word_length: int
    required: FrozenSet[str] = frozenset()
    excluded: FrozenSet[str] = frozenset()
    known: Tuple[Slot, ...] = ()

    def __post_init__(self):
        # Accept any iterable from callers but store immutable containers.
        object.__setattr__(self, "required", frozenset(self.required))
        object.__setattr__(self, "excluded", frozenset(self.excluded))
        known = tuple(self.known)
        if not known and isinstance(self.word_length, int) and self.word_length > 0:
            known = (None,) * self.word_length
        object.__setattr__(self, "known", known)

    @classmethod
    def empty(cls, word_length: int) -> "Constraint":
        """A constraint that only fixes the word length."""
        return cls(word_length=word_length)

    @property
    def known_letters(self) -> FrozenSet[str]:
        return frozenset(k for k in self.known if k is not None)

    def describe(self) -> str:
        """
        Compact rendition for logs, e.g. "____e +a -g".
        """
        parts = ["".join(k if k else "_" for k in self.known)]
        if self.required:
            parts.append("+" + "".join(sorted(self.required)))
        if self.excluded:
            parts.append("-" + "".join(sorted(self.excluded)))
        return " ".join(parts)


def _normalize(word: str) -> str:
    # Comparisons are case-insensitive; nothing else about the word changes.
    return word.lower()


def matches(word: str, constraint: Constraint) -> bool:
    """
    Return True if `word` satisfies every rule of `constraint`.

    Rules, in order:
      1) exact length
      2) no excluded letter anywhere
      3) every required letter somewhere
      4) every known slot holds its letter
    """
    w = _normalize(word)
    if len(w) != constraint.word_length:
        return False

    letters = set(w)
    if letters & constraint.excluded:
        return False
    if not constraint.required <= letters:
        return False

    for k, ch in zip(constraint.known, w):
        if k is not None and k != ch:
            return False
    return True


def build_pattern(constraint: Constraint) -> str:
    """
    Build the regular expression equivalent of `constraint`.

    The pattern is meant for `fullmatch`:
      - one lookahead per required letter:  (?=.*a)
      - each unknown slot is [^excluded] (or "." when nothing is excluded)
      - each known slot is its literal letter

    Example:
      required {a}, excluded {g}, known ____e  ->  "(?=.*a)[^g][^g][^g][^g]e"
    """
    if constraint.excluded:
        group = "[^" + "".join(sorted(constraint.excluded)) + "]"
    else:
        group = "."

    lookaheads = "".join(f"(?=.*{re.escape(c)})" for c in sorted(constraint.required))
    body = "".join(re.escape(k) if k is not None else group for k in constraint.known)
    return lookaheads + body


def _regex_predicate(constraint: Constraint) -> Callable[[str], bool]:
    rx = re.compile(build_pattern(constraint), re.DOTALL)
    n = constraint.word_length
    return lambda w: len(w) == n and rx.fullmatch(w) is not None


def _set_predicate(constraint: Constraint) -> Callable[[str], bool]:
    return lambda w: matches(w, constraint)


STRATEGIES: Dict[str, Callable[[Constraint], Callable[[str], bool]]] = {
    "set": _set_predicate,
    "regex": _regex_predicate,
}


def filter_candidates(
        words: Iterable[str],
        constraint: Constraint,
        *,
        strategy: str = "set",
) -> List[str]:
    """
    Keep only the words that satisfy `constraint`.

    Args:
      words      : iterable of candidate words (mixed case, blanks and
                   wrong-length lines are fine; they are simply rejected)
      constraint : what is known about the hidden word
      strategy   : "set" or "regex"; both give identical results

    Returns:
      List[str] of lowercased matches, order preserved
      as in `words`. Duplicates in `words` are kept.

    Raises:
      InvalidConstraint if `constraint` breaks one of its invariants.
      ValueError for an unknown strategy name.
    """
    validate_constraint(constraint)
    try:
        make_predicate = STRATEGIES[strategy]
    except KeyError as e:
        raise ValueError(
            f"Unknown strategy: {strategy}. Available: {sorted(STRATEGIES)}") from e

    keep = make_predicate(constraint)
    out: List[str] = []
    seen = 0
    for word in words:
        seen += 1
        w = _normalize(word)
        if keep(w):
            out.append(w)

    log.debug("filter %s (%s): %d of %d words kept",
              constraint.describe(), strategy, len(out), seen)
    return out
