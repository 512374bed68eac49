"""
Constraint validation.

This module answers the question: "Can this constraint ever be satisfied,
and is it free of contradictions?" A constraint is valid iff:
  - word_length is an int >= 2
  - every letter is a single character a–z
  - `known` has exactly word_length slots
  - not all 26 letters are excluded
  - no letter is both required and excluded
  - no known letter is also listed as required or excluded
  - there are no more required letters than unknown positions

A known letter repeated in `required` or `excluded` is treated as a
contradiction, not a strengthening: the caller is told instead of getting
a filter that silently matches nothing.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING, Iterable

from .errors import InvalidConstraint

if TYPE_CHECKING:
    from .constraints import Constraint

ALPHABET = frozenset(string.ascii_lowercase)
MIN_WORD_LENGTH = 2


def _is_letter(c) -> bool:
    return isinstance(c, str) and c in ALPHABET


def _fmt(letters: Iterable[str]) -> str:
    return ",".join(sorted(letters))


def validate_constraint(constraint: "Constraint") -> "Constraint":
    """
    Return `constraint` unchanged, or raise InvalidConstraint naming the
    first rule it breaks.
    """
    n = constraint.word_length
    if not isinstance(n, int) or isinstance(n, bool) or n < MIN_WORD_LENGTH:
        raise InvalidConstraint(f"word length must be at least {MIN_WORD_LENGTH}; got {n!r}")

    for name in ("required", "excluded"):
        bad = [c for c in getattr(constraint, name) if not _is_letter(c)]
        if bad:
            raise InvalidConstraint(f"{name} letters must be single a–z letters; got {bad!r}")

    if len(constraint.known) != n:
        raise InvalidConstraint(
            f"known positions must have {n} slots; got {len(constraint.known)}")
    bad = [k for k in constraint.known if k is not None and not _is_letter(k)]
    if bad:
        raise InvalidConstraint(f"known letters must be single a–z letters; got {bad!r}")

    if constraint.excluded >= ALPHABET:
        raise InvalidConstraint("all 26 letters of the alphabet have been excluded")

    overlap = constraint.required & constraint.excluded
    if overlap:
        raise InvalidConstraint(
            f"letters both required and excluded: {_fmt(overlap)}")

    known = constraint.known_letters
    reused = known & (constraint.required | constraint.excluded)
    if reused:
        raise InvalidConstraint(
            f"known letters also given as required or excluded: {_fmt(reused)}")

    # Required letters can't sit in known slots, so they need free ones.
    free = sum(1 for k in constraint.known if k is None)
    if len(constraint.required) > free:
        raise InvalidConstraint(
            f"{len(constraint.required)} letters required but only {free} unknown position(s) left")

    return constraint
