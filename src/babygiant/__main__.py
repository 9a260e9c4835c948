"""Main entry point: python -m babygiant"""

from __future__ import annotations

import argparse
import logging
import sys

from babygiant import __version__
from babygiant.core.errors import BabyGiantError
from babygiant.core.harness import (
    CoordinateProvider,
    NargoCoordinateProvider,
    StaticCoordinateProvider,
)
from babygiant.core.pipeline import compute_dlog
from babygiant.utils.constants import DEFAULT_BIT_WIDTH, HARNESS_BYTE_ORDER
from babygiant.utils.types import SolverConfig

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="babygiant",
        description="Recover a bounded discrete logarithm on Baby Jubjub (baby-step giant-step)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--debug", action="store_true", help="Verbose logging and full tracebacks")

    sub = parser.add_subparsers(dest="command")

    def add_search_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("--bits", type=int, default=DEFAULT_BIT_WIDTH,
                       help=f"Search bound: k < 2^bits, even (default {DEFAULT_BIT_WIDTH})")
        p.add_argument("--workers", type=int, default=None,
                       help="Worker processes (default: CPU count)")
        p.add_argument("--no-validate", action="store_true",
                       help="Skip the on-curve check of the target point")
        p.add_argument("--byteorder", choices=("little", "big"), default=HARNESS_BYTE_ORDER,
                       help=f"Byte order of the coordinate hex strings (default {HARNESS_BYTE_ORDER})")

    # solve
    solve = sub.add_parser("solve", help="Solve for explicit coordinates")
    solve.add_argument("--x", required=True, help="0x-prefixed hex x-coordinate")
    solve.add_argument("--y", required=True, help="0x-prefixed hex y-coordinate")
    add_search_args(solve)

    # nargo
    nargo = sub.add_parser("nargo", help="Run `nargo test --show-output` and solve its output")
    nargo.add_argument("--project-dir", type=str, default=None, help="Noir project directory")
    add_search_args(nargo)

    return parser


def make_config(args: argparse.Namespace) -> SolverConfig:
    return SolverConfig(
        bit_width=args.bits,
        workers=args.workers,
        validate_points=not args.no_validate,
        byteorder=args.byteorder,
        debug=args.debug,
    )


def get_provider(args: argparse.Namespace) -> CoordinateProvider:
    """Resolve the coordinate source from args."""
    if args.command == "nargo":
        return NargoCoordinateProvider(project_dir=args.project_dir)
    return StaticCoordinateProvider(args.x, args.y)


def run_solve(args: argparse.Namespace, config: SolverConfig) -> int:
    """Full pipeline: provider -> decode -> build -> search -> report."""
    pair = get_provider(args).fetch()

    print(f"decrypted_x: {pair.x}")
    print(f"decrypted_y: {pair.y}")
    print(f"Searching k < 2^{config.bit_width}...")

    result = compute_dlog(pair, config)
    if result is None:
        print(f"No discrete logarithm found below 2^{config.bit_width}")
        return EXIT_NOT_FOUND

    print(f"Discrete logarithm (decrypted message): {result}")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command not in ("solve", "nargo"):
        parser.print_help()
        return EXIT_OK

    config = make_config(args)
    try:
        return run_solve(args, config)
    except (BabyGiantError, ValueError) as exc:
        if config.debug:
            raise
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
