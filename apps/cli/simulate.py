# apps/cli/simulate.py
"""
Self-play experiments: a scripted solver against the adversary.

This script:
  1) Validates the dictionary (prints counts + SHA).
  2) Loads it and instantiates the requested solver.
  3) Plays one game per opening word with a live progress indicator and writes:
       - CSV:  per-game results + guess/pattern history columns
       - JSON: manifest with config, dictionary hash, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path
from typing import List

from tqdm import tqdm

from absurdle.datasets import read_tokens, validate_dictionary, pretty_summary
from absurdle.engine import AbsurdleError, build_candidates
from absurdle.harness import run_batch
from absurdle.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from absurdle.solvers import create_solver, get_solver_ids

logger = logging.getLogger("absurdle.simulate")

DEFAULT_DICT = "data/dictionary.txt"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def _plain_progress():
    """Per-game callback printing a throttled one-line ETA to stderr."""
    start = time.time()
    last_print = [0.0]

    def on_case(idx: int, total: int, result: dict) -> None:
        now = time.time()
        if (now - last_print[0] >= 1.0) or (idx == total):
            elapsed = now - start
            rate = (idx / elapsed) if elapsed > 0 else 0.0
            remaining = (total - idx) / rate if rate > 0 else 0.0
            pct = 100.0 * idx / max(1, total)
            sys.stderr.write(
                f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
            )
            sys.stderr.flush()
            last_print[0] = now

    return on_case


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, validate the dictionary, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="Absurdle self-play experiments")
    ap.add_argument("--solver", default="first_consistent",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--dict", dest="dict_path", default=DEFAULT_DICT, help="dictionary file")
    ap.add_argument("--sample", type=int,
                    help="play only this many openers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--log-level", default="WARNING", type=str.upper, choices=LOG_LEVELS,
                    help="logging level (default: WARNING)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Validate the dictionary and print a one-liner summary
    rep = validate_dictionary(args.N, args.dict_path)
    print(pretty_summary(rep))
    if not rep["passed"]:
        for issue in rep["issues"]:
            print(f"error: {issue}", file=sys.stderr)
        return 2

    # 2) Load, instantiate solver
    try:
        words = [w.lower() for w in read_tokens(args.dict_path)]
        openers = sorted(build_candidates(words, args.N))
        solver = create_solver(args.solver)
    except (AbsurdleError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    # 3) Choose openers (deterministic sample by seed)
    if args.sample is not None and args.sample < 0:
        print(f"error: --sample must be >= 0; got {args.sample}", file=sys.stderr)
        return 2
    rng = random.Random(args.seed)
    if args.sample is not None and args.sample < len(openers):
        rng.shuffle(openers)
        openers = openers[: args.sample]

    total = len(openers)
    mode = _progress_mode(args.progress)
    logger.info("solver=%s N=%d openers=%d", solver.id, args.N, total)

    # 4) Run batch with live progress
    bar = tqdm(total=total, ncols=80, desc="Playing", unit="game") if mode == "bar" else None
    if bar is not None:
        def on_case(idx, n, r):
            bar.update(1)
    elif mode == "plain":
        on_case = _plain_progress()
    else:
        on_case = None

    results = run_batch(solver, openers, words=words, N=args.N, seed=args.seed,
                        on_case=on_case)

    if bar is not None:
        bar.close()
    elif mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), N=args.N)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "num_cases": len(results),
        "solver_id": solver.id,
    }
    write_manifest(manifest, str(manifest_path))

    if results:
        mean = sum(r["guesses"] for r in results) / len(results)
        print(f"{solver.id}: {len(results)} games, mean guesses {mean:.2f}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
