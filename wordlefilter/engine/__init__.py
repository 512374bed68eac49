from .errors import (
    WordFilterError, DictionaryUnavailable, InvalidConstraint, MalformedArgument, ResultsUnwritable,
)
from .constraints import Constraint, filter_candidates, matches, build_pattern
from .validation import validate_constraint
from .parsing import build_constraint, parse_letters, parse_known

__all__ = [
    "Constraint", "filter_candidates", "matches", "build_pattern",
    "validate_constraint", "build_constraint", "parse_letters", "parse_known",
    "WordFilterError", "DictionaryUnavailable", "InvalidConstraint", "MalformedArgument",
    "ResultsUnwritable",
]
