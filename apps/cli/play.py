# apps/cli/play.py
"""
Interactive Absurdle in the terminal.

This script:
  1) Asks for a dictionary file and a word length (unless given as flags).
  2) Prints a one-line dictionary summary and builds the candidate set.
  3) Reads guesses until one comes back all green, printing the emoji pattern
     after every guess, then prints the "Absurdle n/∞" score card.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from absurdle.datasets import read_tokens, validate_dictionary, pretty_summary
from absurdle.engine import AbsurdleError, LengthMismatch, evaluate, render, validate_guess
from absurdle.harness import new_game, is_finished, share_summary

logger = logging.getLogger("absurdle.play")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _ask(prompt: str) -> str:
    return input(prompt).strip()


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Absurdle: the word game that never picks a word")
    ap.add_argument("--dict", dest="dict_path", help="dictionary file (whitespace-separated words)")
    ap.add_argument("--length", type=int, help="word length to play with")
    ap.add_argument("--known-only", action="store_true",
                    help="reject guesses that are not in the dictionary")
    ap.add_argument("--log-level", default="WARNING", type=str.upper, choices=LOG_LEVELS,
                    help="logging level (default: WARNING)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    print("Welcome to the game of Absurdle.")
    try:
        dict_path = args.dict_path or _ask("What dictionary would you like to use? ")
        length = args.length
        if length is None:
            raw = _ask("What length word would you like to guess? ")
            try:
                length = int(raw)
            except ValueError:
                print(f"error: not a number: {raw!r}", file=sys.stderr)
                return 2
    except EOFError:
        return 1

    rep = validate_dictionary(length, dict_path)
    print(pretty_summary(rep))
    try:
        words = [w.lower() for w in read_tokens(dict_path)]
        candidates = new_game(words, length)
    except (FileNotFoundError, AbsurdleError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    if not rep["passed"]:
        for issue in rep["issues"]:
            print(f"error: {issue}", file=sys.stderr)
        return 2

    known = set(candidates) if args.known_only else None
    logger.info("starting game: N=%d candidates=%d", length, len(candidates))

    patterns: List[str] = []
    while not is_finished(patterns):
        try:
            guess = _ask("> ").lower()
        except EOFError:
            print()
            break

        if known is not None and not validate_guess(guess, known, length):
            print(f"not a known {length}-letter word: {guess}")
            continue
        try:
            patt = evaluate(guess, candidates, length)
        except LengthMismatch:
            print(f"guess must be {length} letters")
            continue
        except AbsurdleError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2

        patterns.append(patt)
        print(": " + render(patt))
        print()

    if is_finished(patterns):
        print(share_summary(patterns))
        return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())
