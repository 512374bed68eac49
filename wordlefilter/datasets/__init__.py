from .validator import inspect_dictionary, pretty_summary
from .io import read_lines, load_dictionary, write_lines, unique_words

__all__ = ["inspect_dictionary", "pretty_summary",
           "read_lines", "load_dictionary", "write_lines", "unique_words"]
