"""
CLI — runs one pattern demo or all of them.

Each demo is also runnable on its own (``python -m design_patterns.<demo>``);
this command just gives them a single entry point and a log-level switch.

Usage:
    # Run every demo, in order:
    design-patterns

    # Run one demo:
    design-patterns singleton

    # Show what the demos log while they run:
    design-patterns observer --log-level INFO
"""

import argparse
import logging
from collections.abc import Callable, Sequence

from design_patterns import builder, factory, observer, singleton, strategy
from design_patterns.config import DEFAULT_LOG_LEVEL, DEMO_NAMES, configure_logging
from design_patterns.domain.errors import DesignPatternError

logger = logging.getLogger(__name__)

DEMOS: dict[str, Callable[[], None]] = {
    "builder": builder.run_demo,
    "observer": observer.run_demo,
    "singleton": singleton.run_demo,
    "strategy": strategy.run_demo,
    "factory": factory.run_demo,
}


def run_cli(args: argparse.Namespace) -> int:
    configure_logging(args.log_level)

    names = DEMO_NAMES if args.demo == "all" else (args.demo,)
    for index, name in enumerate(names):
        if index:
            print()
        logger.info("Running %s demo", name)
        try:
            DEMOS[name]()
        except DesignPatternError:
            logger.exception("%s demo failed", name)
            return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the design pattern demos")
    parser.add_argument("demo", nargs="?", default="all", choices=[*DEMO_NAMES, "all"], help="Demo to run")
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level for stderr output",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    return run_cli(build_parser().parse_args(argv))


if __name__ == "__main__":
    raise SystemExit(main())
