import argparse
import logging
import sys

import uvicorn

from rover.engine.reducer import parse_start, render, trace
from rover.utils.consts import API_HOST, API_PORT
from rover.utils.errors import RoverError


def run_command(start, instructions, show_trace=False):
    """
    Runs instructions from a start string and prints the result.

    Args:
        start (str): e.g. "1 2 N"
        instructions (str): e.g. "LMLMLMLMM"
        show_trace (bool): print every intermediate state, not just the last one.

    Returns:
        int: process exit code
    """
    try:
        states = trace(parse_start(start), instructions)
    except RoverError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for state in (states if show_trace else states[-1:]):
        print(render(state))
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Drive a rover with L/R/M instructions.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Run instructions and print the final state.")
    run_parser.add_argument("start", help="Start state, e.g. '1 2 N'.")
    run_parser.add_argument("instructions", nargs="?", default="", help="Instruction string, e.g. 'LMLMM'.")
    run_parser.add_argument("--trace", action="store_true", help="Print every intermediate state.")

    serve_parser = subparsers.add_parser("serve", help="Start the HTTP server.")
    serve_parser.add_argument("--host", default=API_HOST)
    serve_parser.add_argument("--port", type=int, default=API_PORT)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.command == "serve":
        from main import app
        uvicorn.run(app, host=args.host, port=args.port)
        return 0

    return run_command(args.start, args.instructions, show_trace=args.trace)


if __name__ == '__main__':
    sys.exit(main())
