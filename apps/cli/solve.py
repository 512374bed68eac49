# apps/cli/solve.py
"""
CLI entry point for wordle-filter.

This script:
  1) Parses the flags once into an immutable SolveArgs value.
  2) Builds and validates a Constraint from the letter/position tokens.
  3) Loads the dictionary (optionally deduped + sorted first).
  4) Filters it and prints the matches, or writes them to a results file.

Examples:
    python -m apps.cli.solve --exclude g,r --require a --known 5e
    python -m apps.cli.solve --dict words.txt --length 6 --known 1m,2o -v --save
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional

from wordlefilter.datasets import (
    inspect_dictionary, load_dictionary, pretty_summary, unique_words, write_lines,
)
from wordlefilter.engine import (
    Constraint, WordFilterError, build_constraint, build_pattern, filter_candidates,
)
from wordlefilter.engine.constraints import STRATEGIES

log = logging.getLogger("wordlefilter.cli")

DEFAULT_DICT = "wordlewords.txt"
DEFAULT_LENGTH = 5
DEFAULT_RESULTS = "results.txt"


@dataclass(frozen=True)
class SolveArgs:
    """Parsed command line, built once and passed explicitly."""
    dict_path: str
    length: int
    require: str
    exclude: str
    known: str
    unique: bool
    strategy: str
    strict: bool
    save: Optional[str]
    verbose: bool

    @classmethod
    def from_namespace(cls, ns: argparse.Namespace) -> "SolveArgs":
        return cls(
            dict_path=ns.dict,
            length=ns.length,
            require=ns.require or "",
            exclude=ns.exclude or "",
            known=ns.known or "",
            unique=ns.unique,
            strategy=ns.strategy,
            strict=ns.strict,
            save=ns.save,
            verbose=ns.verbose,
        )


def make_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="wordle-filter",
        description="wordle-filter — list dictionary words that fit what you know so far",
    )
    ap.add_argument("--dict", default=DEFAULT_DICT,
                    help=f"path to a word list, one word per line (default: {DEFAULT_DICT})")
    ap.add_argument("--length", type=int, default=DEFAULT_LENGTH,
                    help="length of the word to find (at least 2)")
    ap.add_argument("--require", "--include", dest="require", default="",
                    help="letters known to be in the word, position unknown: --require m,s,e")
    ap.add_argument("--exclude", default="",
                    help="letters known NOT to be in the word: --exclude m,s,e")
    ap.add_argument("--known", default="",
                    help="known positions (1-based) and letters: --known 1m,2o,3u")
    ap.add_argument("--unique", action="store_true",
                    help="dedupe and sort the dictionary before filtering")
    ap.add_argument("--strategy", choices=sorted(STRATEGIES), default="set",
                    help="matching strategy (results are identical)")
    ap.add_argument("--strict", action="store_true",
                    help="abort on a malformed letter/position token instead of skipping it")
    ap.add_argument("--save", nargs="?", const=DEFAULT_RESULTS, default=None, metavar="PATH",
                    help=f"write the matches to a file instead of stdout (default: {DEFAULT_RESULTS})")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="show how the arguments were interpreted")
    return ap


def _log_interpretation(args: SolveArgs, constraint: Constraint) -> None:
    """Verbose diagnostics: what the shell made of the user's tokens."""
    log.info("Letters to require: %s", ", ".join(sorted(constraint.required)) or "(none)")
    log.info("Letters to exclude: %s", ", ".join(sorted(constraint.excluded)) or "(none)")
    log.info("Known positions: %s", "".join(k or "_" for k in constraint.known))
    log.info("Pattern applied to each word: %s", build_pattern(constraint))
    log.info("Dictionary: %s", pretty_summary(inspect_dictionary(args.dict_path, args.length)))


def run(args: SolveArgs) -> int:
    """
    Execute one filtering run. Raises WordFilterError subclasses on failure.
    """
    # Constraint problems are reported before the dictionary is touched.
    constraint = build_constraint(
        args.length,
        require=args.require,
        exclude=args.exclude,
        known=args.known,
        strict=args.strict,
    )
    if args.verbose:
        _log_interpretation(args, constraint)

    if args.unique:
        words: List[str] = unique_words([args.dict_path], word_length=args.length)
    else:
        words = load_dictionary(args.dict_path)

    found = filter_candidates(words, constraint, strategy=args.strategy)

    if args.save:
        path = write_lines(found, args.save)
        print(f"Wrote: {path} ({len(found)} words)")
        return 0

    print(f"{len(found)} possible solutions:")
    for w in found:
        print(w)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, configure logging, run, and map errors to an exit status.
    """
    ap = make_argparser()
    ns = ap.parse_args(argv)

    if ns.length < 2:
        ap.error("--length must be at least 2")
    if not (ns.require or ns.exclude or ns.known):
        ap.error("no constraints given: use --require, --exclude or --known")

    args = SolveArgs.from_namespace(ns)
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(message)s",
        force=True,
    )

    try:
        return run(args)
    except WordFilterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
