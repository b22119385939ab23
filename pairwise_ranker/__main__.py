"""
CLI entry point for the pairwise ranker.

Parses arguments, loads item names, wires components and runs a session.
"""

import argparse
import sys
from argparse import Namespace
from collections.abc import Callable, Sequence
from typing import TypedDict

from .config import CONFIDENCE_THRESHOLD, K0, MIN_JUDGED_FRACTION, SessionConfig
from .exceptions import ConfigurationError, InsufficientItemsError
from .export import format_rankings_table, write_comparisons_jsonl, write_rankings_csv
from .ingest import load_names
from .interfaces import Judge, Selector
from .judges.interactive_judge import InteractiveJudge
from .judges.sim_judge import SimulatedJudge
from .logging_config import get_logger, setup_logging
from .models import Comparison
from .match_selectors.shuffled_selector import ShuffledSelector
from .runner import SessionRunner
from .session import COMPLETED_CONFIDENT, RankingSession


class CLIArgs(TypedDict):
    """Typed representation of parsed CLI arguments."""
    file: str | None
    items: list[str] | None
    export: str | None
    audit_log: str | None
    selector: str
    simulate: bool
    noise: float
    seed: int | None
    confidence_threshold: float
    min_judged_fraction: float
    k0: float
    debug: bool
    log_level: str
    log_file: str | None


def parse_args(argv: Sequence[str] | None = None) -> Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Pairwise Ranker - rank items by answering \"A or B?\""
    )

    source = parser.add_mutually_exclusive_group(required=True)
    _ = source.add_argument(
        "--file",
        help="CSV file with one item per cell"
    )
    _ = source.add_argument(
        "--items",
        nargs="+",
        help="Item names given directly on the command line"
    )

    _ = parser.add_argument(
        "--export",
        help="Write final rankings to this CSV file"
    )
    _ = parser.add_argument(
        "--audit-log",
        help="Append every comparison to this JSONL file"
    )
    _ = parser.add_argument(
        "--selector",
        choices=["informative", "shuffled"],
        default="informative",
        help="Match selection policy (default: informative)"
    )
    _ = parser.add_argument(
        "--simulate",
        action="store_true",
        help="Answer with a simulated judge that prefers items listed first"
    )
    _ = parser.add_argument(
        "--noise",
        type=float,
        default=0.1,
        help="Noise level for simulated judge (0-1, default: 0.1)"
    )
    _ = parser.add_argument(
        "--seed",
        type=int,
        help="Seed for the simulated judge and the shuffled selector"
    )
    _ = parser.add_argument(
        "--confidence-threshold",
        type=float,
        default=CONFIDENCE_THRESHOLD,
        help="Early stop once every item reaches this confidence (default: 0.9)"
    )
    _ = parser.add_argument(
        "--min-judged-fraction",
        type=float,
        default=MIN_JUDGED_FRACTION,
        help="Early stop only after this share of pairs is judged (default: 0.3)"
    )
    _ = parser.add_argument(
        "--k0",
        type=float,
        default=K0,
        help="Initial Elo update magnitude (default: 32)"
    )
    _ = parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    _ = parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level (default: WARNING)"
    )
    _ = parser.add_argument(
        "--log-file",
        help="Append the session log to this file"
    )

    return parser.parse_args(argv)


def args_to_typed(ns: Namespace) -> CLIArgs:
    """Convert argparse Namespace to typed CLIArgs."""
    return CLIArgs(
        file=ns.file,
        items=ns.items,
        export=ns.export,
        audit_log=ns.audit_log,
        selector=ns.selector,
        simulate=ns.simulate,
        noise=ns.noise,
        seed=ns.seed,
        confidence_threshold=ns.confidence_threshold,
        min_judged_fraction=ns.min_judged_fraction,
        k0=ns.k0,
        debug=ns.debug,
        log_level=ns.log_level,
        log_file=ns.log_file,
    )


def build_config(args: CLIArgs) -> SessionConfig:
    return SessionConfig(
        k0=args["k0"],
        confidence_threshold=args["confidence_threshold"],
        min_judged_fraction=args["min_judged_fraction"],
    )


def wire_components(args: CLIArgs, names: list[str]) -> tuple[RankingSession, Judge]:
    """Wire session, selector and judge."""
    logger = get_logger("wire_components")

    config = build_config(args)
    selector: Selector | None = None
    if args["selector"] == "shuffled":
        selector = ShuffledSelector(seed=args["seed"])

    session = RankingSession(names, config=config, selector=selector)

    judge: Judge
    if args["simulate"]:
        # First listed item is best
        ground_truth = {name: float(len(names) - i) for i, name in enumerate(names)}
        judge = SimulatedJudge(ground_truth, noise=args["noise"], seed=args["seed"])
        logger.info(f"Using simulated judge with noise {args['noise']}")
    else:
        judge = InteractiveJudge()

    return session, judge


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point."""
    args = args_to_typed(parse_args(argv))
    setup_logging(level=args["log_level"], debug=args["debug"], log_file=args["log_file"])
    logger = get_logger("main")

    try:
        if args["file"] is not None:
            names = load_names(path=args["file"])
        else:
            names = load_names(text="\n".join(args["items"] or []))
        session, judge = wire_components(args, names)
    except (InsufficientItemsError, ConfigurationError, OSError) as e:
        logger.error(f"Cannot start session: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    audit_log = args["audit_log"]

    def log_comparison(comparison: Comparison) -> None:
        _ = write_comparisons_jsonl([comparison], audit_log or "")

    on_comparison: Callable[[Comparison], None] | None = log_comparison if audit_log else None

    print(f"Ranking {len(names)} items ({session.total_pair_count()} possible pairs)")
    print("=" * 60)

    runner = SessionRunner(session, judge, on_comparison=on_comparison)
    try:
        rankings = runner.run()
    except KeyboardInterrupt:
        logger.warning("Ranking interrupted by user")
        print("\nRanking interrupted by user")
        rankings = session.get_rankings()

    progress = session.progress()
    print(f"\nJudged {progress['judged']}/{progress['total']} pairs ({progress['percent']}%)")
    if session.completion_reason == COMPLETED_CONFIDENT:
        print("Stopped early: every item's position is settled.")
    print(format_rankings_table(rankings))

    if args["export"]:
        _ = write_rankings_csv(rankings, args["export"])
        print(f"Rankings written to {args['export']}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
