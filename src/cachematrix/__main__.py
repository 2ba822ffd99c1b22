"""CLI entry point: ``python -m cachematrix``."""

from __future__ import annotations

import argparse
import json
import logging
import sys

import numpy as np

from .backend import get_backend
from .holder import make_cache_matrix
from .solve import cache_solve
from .utils import to_numpy


def _parse_matrix(raw: str) -> np.ndarray:
    data = json.loads(raw)
    matrix = np.array(data, dtype=np.float64)
    if matrix.ndim != 2:
        raise ValueError(f"expected a 2-D matrix, got {matrix.ndim} dimension(s)")
    return matrix


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m cachematrix",
        description="Invert a matrix through a cached holder and report cache use.",
    )
    parser.add_argument("matrix", help="Matrix as a JSON nested list, e.g. '[[4,7],[2,6]]'")
    parser.add_argument("--repeat", type=int, default=2, help="Number of cache_solve calls")
    parser.add_argument(
        "--backend",
        type=str,
        default=None,
        help="Solve backend (numpy, mlx). Default: $CACHEMATRIX_BACKEND or numpy",
    )
    parser.add_argument("--verbose", action="store_true", help="Log cache activity to stderr")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.repeat < 1:
        print(f"--repeat must be >= 1 (got {args.repeat})", file=sys.stderr)
        return 2

    try:
        matrix = _parse_matrix(args.matrix)
        backend = get_backend(args.backend)
    except ValueError as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return 2

    holder = make_cache_matrix(matrix)
    try:
        for _ in range(args.repeat):
            inverse = cache_solve(holder, backend=backend)
    except (np.linalg.LinAlgError, RuntimeError, ValueError) as exc:
        print(f"Solve failed: {exc}", file=sys.stderr)
        return 1

    print(np.array2string(to_numpy(inverse)))
    print(f"hits={holder.stats.hits} misses={holder.stats.misses}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
