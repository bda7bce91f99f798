"""Command-line entry point: run a block program against a level."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .api import dump_grid, dump_trace
from .errors import BotCommanderError
from .executor import initial_state
from .levels import get_level
from .program import parse_program
from .run import Playback
from .run_types import RunConfig
from .scoring import check_capacity, rate_run
from .world import load_level

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="botcommander",
        description="Bot Commander — compile a block program and run it on a level",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="Program JSON file (default: the level's reference solution)",
    )
    parser.add_argument(
        "--level", "-l", type=int, default=1, help="Campaign level id (default: 1)"
    )
    parser.add_argument(
        "--level-file", default=None, help="Level JSON file, overrides --level"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=0.0,
        help="Seconds to pause between steps (default: 0)",
    )
    parser.add_argument(
        "--max-steps",
        "-n",
        type=int,
        default=RunConfig().max_steps,
        help=f"Maximum executed steps (default: {RunConfig().max_steps})",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Enforce the level's block limit and palette",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Print step-by-step execution"
    )
    parser.add_argument(
        "--trace-only",
        action="store_true",
        help="Only print the compiled trace (no execution)",
    )
    parser.add_argument(
        "--grid-only",
        action="store_true",
        help="Only print the level grid (no execution)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Exit status: 0 on a win, 1 on an error, 2 when the run ends without a win."""
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    try:
        if args.level_file:
            level = load_level(args.level_file)
        else:
            level = get_level(args.level)

        if args.grid_only:
            print(dump_grid(level, initial_state(level)))
            return 0

        if args.file:
            program = parse_program(Path(args.file).read_text(encoding="utf-8"))
        else:
            program = list(level.solution)
            print(f"No program file provided. Using the solution for '{level.name}'.")

        if args.trace_only:
            print("═══ Trace ═══")
            print(dump_trace(program))
            return 0

        if args.strict:
            check_capacity(program, level)

        config = RunConfig(
            max_steps=args.max_steps, tick_delay=args.delay, verbose=args.verbose
        )
        playback = Playback(program, level, config)
        final = playback.run_to_end()
    except (BotCommanderError, ValidationError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    rating = rate_run(program, level, final)
    print("═══ Grid ═══")
    print(dump_grid(level, final))
    print("\n═══ Final Robot State ═══")
    result = final.to_dict()
    result["outcome"] = playback.outcome.value if playback.outcome else None
    result["rating"] = rating.value
    print(json.dumps(result, indent=2))
    return 0 if final.won else 2


if __name__ == "__main__":
    sys.exit(main())
