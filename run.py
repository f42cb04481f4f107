#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four engine
"""

import argparse
import sys

from c4engine.debug import debug, DebugLevel
from c4engine.game.rules import GameSession
from c4engine.interfaces.cli import ConsoleUI, run_benchmark


def configure_debug(args):
    """Configure debug level based on args.debug or args.debug_level."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level)
    if args.log_file:
        debug.configure(log_file=args.log_file)


def handle_play(args):
    session = GameSession()
    console = ConsoleUI(session, mode=args.mode)
    try:
        console.start()
    except (KeyboardInterrupt, EOFError):
        print(f"\nThank you for playing {session.game_name}")


def handle_benchmark(args):
    if args.iterations < 1:
        print("--iterations must be at least 1")
        sys.exit(1)
    run_benchmark(args.iterations)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Connect Four - console game and board engine tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py play                 # choose the opponent at the prompt
  python run.py play --mode pvc      # play against the computer
  python run.py benchmark --iterations 5000
""")
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--debug_level', default='warning',
                        choices=[level.name.lower() for level in DebugLevel],
                        help='Logging level (ignored with --debug)')
    parser.add_argument('--log_file', default=None,
                        help='Also write log messages to this file')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    play_parser = subparsers.add_parser('play', help='Play a game in the console')
    play_parser.add_argument('--mode', choices=['ask', 'pvp', 'pvc'], default='ask',
                             help='Opponent type: ask at start, another player, or the computer')

    benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark the board engine')
    benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                  help='Number of iterations for benchmarking')

    args = parser.parse_args(argv)
    configure_debug(args)

    if args.command == 'play':
        handle_play(args)
    elif args.command == 'benchmark':
        handle_benchmark(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
