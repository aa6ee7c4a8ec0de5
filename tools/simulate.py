from __future__ import annotations

import argparse
import json
import os
import random
import sys
import time

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from game import (  # type: ignore
    MenuChoice,
    MenuLoop,
    PieceFactory,
    QUEUE_CAPACITY,
    Session,
    stats_to_json,
)


def simulate(steps: int, seed: int | None, capacity: int, verbose: bool = True) -> dict:
    """Drive a session with random play/insert choices, then quit.
    The same seed feeds piece kinds and action picks, so a run is reproducible."""
    rng = random.Random(seed)
    session = Session(PieceFactory(rng=rng), capacity=capacity)
    queue = session.initialize()
    loop = MenuLoop(session, queue)

    played = inserted = rejected = 0
    for i in range(steps):
        choice = rng.choice((MenuChoice.PLAY, MenuChoice.INSERT))
        res = loop.step(choice)
        if not res.ok:
            rejected += 1
        elif choice == MenuChoice.PLAY:
            played += 1
        else:
            inserted += 1
        if verbose:
            tag = choice.name.lower()
            what = res.piece.label() if res.piece is not None else f"rejected ({res.error})"
            labels = ' '.join(p.label() for p in res.snapshot)
            print(f"{i:5d} {tag:<6} {what:<28} | {labels}")

    final = loop.step(MenuChoice.QUIT)
    if final.stats is None:
        raise RuntimeError("quit did not report session statistics")
    out = stats_to_json(final.stats)
    out.update({"played": played, "inserted": inserted, "rejected": rejected})
    return out


def main() -> int:
    ap = argparse.ArgumentParser(description='Run a scripted Tetris Stack session')
    ap.add_argument('--steps', type=int, default=50)
    ap.add_argument('--seed', type=int, default=None)
    ap.add_argument('--capacity', type=int, default=QUEUE_CAPACITY)
    ap.add_argument('--quiet', action='store_true', help='Only print the final summary')
    args = ap.parse_args()

    if args.capacity < 1:
        ap.error('--capacity must be positive')
    start = time.time()
    summary = simulate(max(0, args.steps), args.seed, args.capacity, verbose=not args.quiet)
    summary["elapsedSec"] = round(time.time() - start, 3)
    print(json.dumps(summary))
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
