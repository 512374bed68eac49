"""
Merge word files into one sorted, duplicate-free dictionary.

Features:
- Any number of --in files; words are lowercased before comparing.
- Optional --length to keep only words of one length.
- Optional --expect PATH=COUNT to warn when a source file isn't the size you think.
- Writes to --out, or to stdout when --out is omitted.

Usage:
    python -m script.merge_wordlists --in answers.txt --in allowed.txt \
        --length 5 --out wordlewords.txt
"""

import argparse
import logging
import sys
from typing import Dict, List

from tqdm import tqdm

from wordlefilter.datasets import unique_words, write_lines
from wordlefilter.engine import WordFilterError

log = logging.getLogger("wordlefilter.merge")


def parse_expect(items: List[str]) -> Dict[str, int]:
    out: Dict[str, int] = {}
    for item in items:
        path, sep, count = item.rpartition("=")
        if not sep or not count.isdigit():
            raise argparse.ArgumentTypeError(f"--expect wants PATH=COUNT; got {item!r}")
        out[path] = int(count)
    return out


def merge(paths: List[str], *, length=None, expected=None, progress=True) -> List[str]:
    merged = set()
    for p in tqdm(paths, ncols=80, desc="Merging", unit="file", disable=not progress):
        merged.update(unique_words([p], word_length=length, expected_counts=expected))
    return sorted(merged)


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Merge word files into one sorted, unique list.")
    ap.add_argument("--in", dest="inp", action="append", required=True, help="input .txt file (repeatable)")
    ap.add_argument("--out", dest="out", help="output file (default: stdout)")
    ap.add_argument("--length", type=int, help="keep only words of this length")
    ap.add_argument("--expect", action="append", default=[], metavar="PATH=COUNT",
                    help="expected number of words in an input file (warn on mismatch)")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    args = ap.parse_args(argv)

    logging.basicConfig(stream=sys.stderr, level=logging.WARNING, format="%(message)s", force=True)
    try:
        expected = parse_expect(args.expect)
    except argparse.ArgumentTypeError as e:
        ap.error(str(e))

    try:
        out = merge(args.inp, length=args.length, expected=expected, progress=not args.no_progress)
        if args.out:
            write_lines(out, args.out)
    except WordFilterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.out:
        print(f"Inputs: {len(args.inp)} file(s) → Output: {args.out} ({len(out)} unique)")
    else:
        for w in out:
            print(w)
    return 0


if __name__ == "__main__":
    sys.exit(main())
