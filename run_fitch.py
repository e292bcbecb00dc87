#!/usr/bin/env python3
# run_fitch.py
# This file is part of Fitchpad - A Fitch-style Natural Deduction Assistant
#
# Command-line interface for building natural deduction proofs

import sys
import argparse
from pathlib import Path
from typing import List

from core.document import ProofDocument
from core.session import ProofSession, SessionError, SessionResult, HELP_TEXT, load_script
from utils.logger import LogLevel, get_logger, set_log_level
from utils.renderer import render_proof, render_sequent
from utils.proof_visualizer import render_graph


def configure_logging_for_session(debug: bool = False) -> None:
    """Configure logging levels for a proof session.

    Session output (the rendered proof and status lines) goes through the
    logger at INFO level, so INFO is the floor.

    Args:
        debug: Enable DEBUG level logging
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    else:
        set_log_level(LogLevel.INFO)


def report(result: SessionResult, verbose: bool) -> None:
    """Print the status line of a command."""
    logger = get_logger()
    if not result.ok:
        logger.warning(f"⚠️  {result.message}")
    elif verbose or "\n" in result.message:
        logger.info(result.message)


def run_script(session: ProofSession, commands: List[str], stop_on_error: bool, verbose: bool) -> int:
    """Replay a command script.

    Returns:
        Number of failed commands
    """
    results = session.run(commands, stop_on_error=stop_on_error)
    for command, result in zip(commands, results):
        if verbose:
            get_logger().info(f"> {command}")
        report(result, verbose)
    return sum(1 for result in results if not result.ok)


def run_interactive(session: ProofSession) -> None:
    """Read commands from the terminal until ``quit`` or end of input."""
    logger = get_logger()
    logger.info(HELP_TEXT)

    while not session.finished:
        try:
            command = input("fitch> ")
        except EOFError:
            break

        if not command.strip():
            continue

        result = session.execute(command)
        report(result, True)
        if result.ok and not session.finished:
            logger.info(render_proof(session.document.snapshot(), unicode=session.unicode))


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Fitchpad natural deduction proof assistant",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_fitch.py
  python run_fitch.py -s proof.fitch
  python run_fitch.py -s proof.fitch --strict --graph modus_ponens

Script file format (one command per line, '#' starts a comment):
  assume (A => B)
  assume A
  elim implies 0 1
        """,
    )

    parser.add_argument(
        "-s", "--script", type=Path, help="Replay commands from a script file"
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject citations of lines and subproofs that are out of scope",
    )

    parser.add_argument(
        "--ascii", action="store_true", help="Render formulas with ASCII symbols"
    )

    parser.add_argument(
        "-g", "--graph", help="Write the justification graph to this file (Graphviz)"
    )

    parser.add_argument(
        "--graph-format", default="png", help="Graphviz output format (default: png)"
    )

    parser.add_argument(
        "--stop-on-error",
        action="store_true",
        help="Stop replaying a script at the first rejected command",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Echo every command and its result"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output"
    )

    return parser


def main() -> int:
    """Main entry point for the proof assistant.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args()

    configure_logging_for_session(debug=args.debug)
    logger = get_logger()

    try:
        session = ProofSession(ProofDocument(strict_scope=args.strict), unicode=not args.ascii)

        if args.script:
            commands = load_script(args.script)
            logger.info(f"📋 Script loaded: {args.script} ({len(commands)} commands)")
            failures = run_script(session, commands, args.stop_on_error, args.verbose)
        else:
            run_interactive(session)
            failures = 0

        snapshot = session.document.snapshot()
        logger.info(render_proof(snapshot, unicode=session.unicode))
        logger.info(f"\n>>> {render_sequent(snapshot, unicode=session.unicode)} <<<")

        if args.graph:
            render_graph(snapshot, args.graph, fmt=args.graph_format, unicode=session.unicode)

        return 1 if failures else 0

    except SessionError as e:
        logger.error(f"Script file error: {e}")
        return 2

    except KeyboardInterrupt:
        logger.error("Session interrupted by user")
        return 3


if __name__ == "__main__":
    sys.exit(main())
