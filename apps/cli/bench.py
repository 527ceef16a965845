# apps/cli/bench.py
"""
Run computer-vs-computer self-play over many secrets and report guess counts.

Every secret in the code space is played once per solver (or a seeded
sample of them), with a live progress indicator. Results are summarized on
stdout only; nothing is written to disk.
"""

from __future__ import annotations
import argparse
import logging
import random
import sys
import time
from typing import Dict, List

from tqdm import tqdm

from mastermind.engine.codespace import ALPHABET_SIZE, CODE_LENGTH, generate_all
from mastermind.harness import run_case, summarize, pretty_summary
from mastermind.solvers import create_solver, get_solver_ids

log = logging.getLogger(__name__)


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def _run_one_solver(solver_id: str, cases: List[str], *, base_seed: int,
                    progress: str) -> List[Dict]:
    solver = create_solver(solver_id)
    results = []
    total = len(cases)
    mode = _progress_mode(progress)
    iterator = tqdm(cases, ncols=80, desc=f"{solver_id}", unit="game") if mode == "bar" else cases
    start = time.time()
    last_print = 0.0

    for idx, secret in enumerate(iterator, 1):
        r = run_case(solver, secret, N=CODE_LENGTH, k=ALPHABET_SIZE, seed=base_seed + idx)
        r["solver_id"] = solver.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{solver_id}] {idx}/{total} {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s")
                sys.stderr.flush()
                last_print = now
    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    return results


def main(argv: list[str] | None = None) -> int:
    registered = get_solver_ids()
    ap = argparse.ArgumentParser(description="mastermind — self-play benchmark")
    ap.add_argument("--solvers", nargs="+", default=["ALL"],
                    help=f"list of solver ids or 'ALL'. Registered: {', '.join(registered)}")
    ap.add_argument("--sample", type=int, help="play only K secrets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123)
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # 1) shared cases (deterministic by seed)
    secrets = generate_all(ALPHABET_SIZE, CODE_LENGTH)
    rng = random.Random(args.seed)
    if args.sample is not None and args.sample < len(secrets):
        pool = list(secrets)
        rng.shuffle(pool)
        cases = pool[:args.sample]
    else:
        cases = secrets

    # 2) expand solvers
    if len(args.solvers) == 1 and args.solvers[0].lower() == "all":
        todo = registered
    else:
        todo = args.solvers
        missing = [s for s in todo if s not in registered]
        if missing:
            raise SystemExit(f"Unknown solver ids: {missing}. Registered: {registered}")

    # 3) run each solver sequentially on the shared cases
    for sid in todo:
        log.info("running %s on %d secrets", sid, len(cases))
        results = _run_one_solver(sid, cases, base_seed=args.seed, progress=args.progress)
        print(pretty_summary(sid, summarize(results)))

    return 0


if __name__ == "__main__":
    sys.exit(main())
