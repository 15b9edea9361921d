#!/usr/bin/env python3
"""
Dispense Chain - Command line entry point.

Usage:
    python -m dispenser_chain.main 2970 2000 [--denominations 1000,500,100,20]
    python -m dispenser_chain.main --serve < commands.jsonl

In one-shot mode every amount is validated and dispensed, and the report
lines are printed. In serve mode one JSON command is read per stdin line
and one JSON response is written per stdout line.
"""

import argparse
import json
import logging
import sys
from typing import Optional, TextIO

from dispenser_chain.application.command_handler import CommandHandler
from dispenser_chain.application.dispense_service import DispenseService
from dispenser_chain.core.exceptions import DispenserError
from dispenser_chain.domain.chain import build_chain
from dispenser_chain.infrastructure.settings import get_settings
from dispenser_chain.loggers import logger


# =============================================================================
# Modes
# =============================================================================


def run_amounts(service: DispenseService, amounts: list[int], out: TextIO) -> int:
    """
    Dispense each amount and print its report lines.

    Returns:
        Exit code (0 if every amount was accepted, 1 otherwise).
    """
    exit_code = 0
    for amount in amounts:
        try:
            result = service.dispense(amount)
        except DispenserError as e:
            print(e.message, file=out)
            exit_code = 1
            continue
        for line in result.lines():
            print(line, file=out)
    return exit_code


def serve(handler: CommandHandler, source: TextIO, out: TextIO) -> int:
    """
    Execute JSON commands read line by line from source.

    Returns:
        Exit code.
    """
    logger.info("Reading commands from stdin")
    for raw_line in source:
        raw_line = raw_line.strip()
        if not raw_line:
            continue
        try:
            command = json.loads(raw_line)
        except json.JSONDecodeError as e:
            logger.error(f"Command parsing error: {e}")
            continue
        if not isinstance(command, dict):
            logger.error(f"Command must be a JSON object, got: {raw_line}")
            continue

        logger.debug(f"Received command: {command}")
        response = handler.execute(command)
        print(json.dumps(response), file=out, flush=True)
    return 0


# =============================================================================
# Arguments
# =============================================================================


def parse_denominations(value: str) -> tuple[int, ...]:
    """Parse a comma separated list of denominations."""
    try:
        return tuple(int(part) for part in value.split(",") if part.strip())
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid denominations: {value}")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="ATM bill dispenser (chain of responsibility)",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "amounts",
        nargs="*",
        type=int,
        help="Amounts to dispense",
    )
    parser.add_argument(
        "--denominations",
        type=parse_denominations,
        default=settings.dispenser.denominations,
        help="Comma separated denominations, largest first",
    )
    parser.add_argument(
        "--granularity",
        type=int,
        default=settings.dispenser.granularity,
        help="Every amount must be a multiple of this value",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Read JSON commands from stdin, one per line",
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


# =============================================================================
# Main Entry Point
# =============================================================================


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code.
    """
    args = parse_args(argv)

    if args.debug:
        logger.setLevel(logging.DEBUG)
        for handler in logger.handlers:
            handler.setLevel(logging.DEBUG)

    try:
        service = DispenseService(build_chain(args.denominations), granularity=args.granularity)
    except DispenserError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    if args.serve:
        return serve(CommandHandler(service), sys.stdin, sys.stdout)

    if not args.amounts:
        print("No amounts given", file=sys.stderr)
        return 2

    return run_amounts(service, args.amounts, sys.stdout)


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Application stopped by user")
        sys.exit(0)
