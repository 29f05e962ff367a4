"""
BPMN Path Finder CLI - find a path between two nodes of a process diagram.

Usage:
    bpmn-path StartEvent_1 ServiceTask_1
    bpmn-path approveInvoice invoiceProcessed --process-key invoice
    bpmn-path StartEvent_1 EndEvent_1 --base-url http://localhost:8080/engine-rest --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from bpmn_path.camunda import ProcessDefinitionClient
from bpmn_path.config import (
    DEFAULT_PROCESS_KEY,
    ENGINE_REST_URL,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL,
    REQUEST_TIMEOUT,
    parse_log_level,
)
from bpmn_path.errors import BpmnPathError
from bpmn_path.service import find_process_path


def positive_float(value: str) -> float:
    """argparse type for a number of seconds greater than zero."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from None
    if not number > 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {value}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="bpmn-path",
        description="Find a path between two flow nodes of a BPMN process",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument("start_id", help="Id of the flow node to start from")
    parser.add_argument("end_id", help="Id of the flow node to reach")
    parser.add_argument(
        "--process-key",
        default=DEFAULT_PROCESS_KEY,
        help=f"Process definition key (default: {DEFAULT_PROCESS_KEY})",
    )
    parser.add_argument(
        "--base-url",
        default=ENGINE_REST_URL,
        help="Engine REST base URL (default: $BPMN_ENGINE_REST_URL or built-in)",
    )
    parser.add_argument(
        "--timeout",
        type=positive_float,
        default=REQUEST_TIMEOUT,
        help=f"Request timeout in seconds (default: {REQUEST_TIMEOUT:g})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else parse_log_level(LOG_LEVEL),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    try:
        with ProcessDefinitionClient(base_url=args.base_url, timeout=args.timeout) as client:
            result = find_process_path(
                args.start_id,
                args.end_id,
                process_key=args.process_key,
                client=client,
            )
    except BpmnPathError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return 0 if result.found else 1

    if not result.found:
        print(f"No path found from {args.start_id} to {args.end_id}.", file=sys.stderr)
        return 1

    print(f"The path from {args.start_id} to {args.end_id} is:")
    print(" -> ".join(result.path))
    return 0


if __name__ == "__main__":
    sys.exit(main())
