"""
Turn command-line tokens into a Constraint.

Token shapes:
  letters : "m,s,e"      comma-separated single letters
  known   : "1m,2o,3u"   1-based position followed by a letter

Tokens are case-insensitive. In lenient mode (the default) a malformed
token is logged and skipped; with strict=True it raises MalformedArgument.
The filter itself never sees raw tokens.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, FrozenSet, Optional, Tuple

from .constraints import Constraint
from .errors import MalformedArgument
from .validation import ALPHABET, validate_constraint

log = logging.getLogger(__name__)

_KNOWN_TOKEN = re.compile(r"(\d+)([a-z])")


def _tokens(text: Optional[str]):
    if not text:
        return []
    return [t.strip() for t in text.lower().split(",") if t.strip()]


def _reject(token: str, why: str, strict: bool) -> None:
    if strict:
        raise MalformedArgument(f"{why}: {token!r}")
    log.warning("Skipping %s: %r", why, token)


def parse_letters(text: Optional[str], *, strict: bool = False) -> FrozenSet[str]:
    """
    Parse "m,s,e" into {"m", "s", "e"}. Repeats collapse.
    """
    out = set()
    for tok in _tokens(text):
        if len(tok) == 1 and tok in ALPHABET:
            out.add(tok)
        else:
            _reject(tok, "not a single letter", strict)
    return frozenset(out)


def parse_known(text: Optional[str], word_length: int, *,
                strict: bool = False) -> Tuple[Optional[str], ...]:
    """
    Parse "1m,5e" into ("m", None, None, None, "e") for word_length 5.

    A position repeated later in the list overrides the earlier letter.
    """
    slots: Dict[int, str] = {}
    for tok in _tokens(text):
        m = _KNOWN_TOKEN.fullmatch(tok)
        if not m:
            _reject(tok, "not a <position><letter> pair", strict)
            continue
        pos = int(m.group(1))
        if pos < 1 or pos > word_length:
            _reject(tok, f"position outside 1..{word_length}", strict)
            continue
        if pos - 1 in slots:
            log.debug("Position %d given twice; keeping %r", pos, m.group(2))
        slots[pos - 1] = m.group(2)

    return tuple(slots.get(i) for i in range(word_length))


def build_constraint(
        word_length: int,
        *,
        require: Optional[str] = "",
        exclude: Optional[str] = "",
        known: Optional[str] = "",
        strict: bool = False,
) -> Constraint:
    """
    Parse all three token lists and return a validated Constraint.

    Raises:
      MalformedArgument (strict mode only) for a badly shaped token.
      InvalidConstraint if the parsed constraint is contradictory.
    """
    c = Constraint(
        word_length=word_length,
        required=parse_letters(require, strict=strict),
        excluded=parse_letters(exclude, strict=strict),
        known=parse_known(known, word_length, strict=strict) if word_length > 0 else (),
    )
    return validate_constraint(c)
