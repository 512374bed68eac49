"""
Error taxonomy for wordle-filter.

Library code raises these; only the CLI catches them and turns them into an
exit status. Each one also subclasses the closest builtin (OSError / ValueError).
"""


class WordFilterError(Exception):
    """Base class for every error raised by wordlefilter."""


class DictionaryUnavailable(WordFilterError, OSError):
    """The dictionary file could not be opened or read."""


class InvalidConstraint(WordFilterError, ValueError):
    """The constraint can never be satisfied or contradicts itself."""


class MalformedArgument(WordFilterError, ValueError):
    """A user-supplied letter or position token has the wrong shape."""


class ResultsUnwritable(WordFilterError, OSError):
    """The results file could not be written."""
