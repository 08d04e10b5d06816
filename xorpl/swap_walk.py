"""Random walks over swap-style register updates.

  xorpl-walk                                  # R=8, C=6, one walk
  xorpl-walk --seed 42 --steps 10000          # reproducible run
  xorpl-walk --walks 16 --output walk.json    # merge independent walks
  xorpl-walk --values 6 --end-state unpermuted --pairing triangular
"""
import argparse
import json
import logging
from pprint import pprint

import numpy as np

from .layout import END_STATE_PREDICATES, default_layout
from .neighbors import PAIRINGS
from .walk import merge_results, random_walk

NUM_REGISTERS = 8
NUM_VALUES = 6
NUM_STEPS = 1_000_000


def build_parser():
    parser = argparse.ArgumentParser(description="Random walk over safe masked register layouts.")
    parser.add_argument("--registers", "-R", type=int, default=NUM_REGISTERS,
                        help="Number of physical registers")
    parser.add_argument("--values", "-C", type=int, default=NUM_VALUES,
                        help="Number of cipher/key registers (even)")
    parser.add_argument("--steps", type=int, default=NUM_STEPS,
                        help="Step budget per walk")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed")
    parser.add_argument("--walks", type=int, default=1,
                        help="Number of independent walks to merge")
    parser.add_argument("--pairing", choices=sorted(PAIRINGS), default="ordered",
                        help="Which (i, j) row pairs a step may xor")
    parser.add_argument("--end-state", choices=sorted(END_STATE_PREDICATES), default="coverage",
                        help="Terminal predicate")
    parser.add_argument("--output", default=None,
                        help="Write the summary as JSON to this path")
    parser.add_argument("--progress", action="store_true",
                        help="Show a progress bar")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--quiet", "-q", action="store_true",
                           help="Only print the summary")
    verbosity.add_argument("--verbose", "-v", action="store_true",
                           help="Debug logging")
    return parser


def run(args):
    start = default_layout(args.registers, args.values)
    seeds = np.random.SeedSequence(args.seed).spawn(args.walks)
    results = []
    for seed in seeds:
        results.append(random_walk(
            start,
            args.steps,
            rng=np.random.default_rng(seed),
            pairing=args.pairing,
            end_state=args.end_state,
            expect_end_state=True,
            progress=args.progress,
        ))
    merged = merge_results(results)

    data = {
        "R": args.registers,
        "C": args.values,
        "Seed": args.seed,
        "Num Walks": args.walks,
        "Pairing": args.pairing,
        "End State": args.end_state,
        **merged.summary(),
        "End States": sorted(x.serialize() for x in merged.end_states),
    }
    return merged, data


def main(argv=None):
    args = build_parser().parse_args(argv)
    level = logging.WARNING if args.quiet else logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(message)s")

    _, data = run(args)
    pprint({k: v for k, v in data.items() if k != "End States"})

    if args.output:
        with open(args.output, "w") as outfile:
            json.dump(data, outfile, indent=4)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
