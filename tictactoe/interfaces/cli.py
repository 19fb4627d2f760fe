"""
cli.py - Command-line interface for the tic-tac-toe engine

This module provides a CLI for playing a two-player game at the terminal,
inspecting the result of a move sequence and benchmarking the engine.
"""

import argparse
import random
import sys
from typing import Callable, List, Optional

from tictactoe.debug import DebugLevel, debug
from tictactoe.game.rules import GameEngine
from tictactoe.interfaces.notation import INSTRUCTIONS, parse_move
from tictactoe.utils import OutcomeKind

QUIT_COMMANDS = ("q", "quit", "exit")
HELP_COMMANDS = ("h", "help", "?")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(description='Tic-tac-toe CLI')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--debug-level', dest='debug_level', default='info',
                        choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
                        help='Logging level (ignored with --debug)')
    parser.add_argument('--log-file', dest='log_file', default=None,
                        help='Also write log output to this file')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    subparsers.add_parser('play', help='Play a two-player game interactively')

    show_parser = subparsers.add_parser('show', help='Apply a move sequence and show the result')
    show_parser.add_argument('--moves', type=str, default='',
                             help='Comma-separated moves, e.g. "tl,m,tr"')

    benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark performance')
    benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                  help='Number of iterations for benchmarking')

    return parser


def configure_logging(args: argparse.Namespace) -> None:
    """Configure the debug manager from parsed arguments."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level)

    if args.log_file:
        debug.configure(log_file=args.log_file)


class SimpleCLI:
    """Simple command-line interface for tic-tac-toe."""

    def __init__(self, input_func: Callable[[str], str] = input):
        """
        Initialize the CLI.

        Args:
            input_func: Function used to read a line from the player
        """
        self.game = GameEngine()
        self.args: Optional[argparse.Namespace] = None
        self.input_func = input_func

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments."""
        self.args = build_parser().parse_args(argv)
        configure_logging(self.args)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Run the CLI based on the parsed arguments.

        Returns:
            Process exit code
        """
        if self.args is None:
            self.parse_args(argv)

        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'show':
            return self.show_moves(self.args.moves)
        elif self.args.command == 'benchmark':
            self.benchmark(self.args.iterations)
        else:
            print("Please specify a command. Use --help for options.")
            return 1
        return 0

    def play_game(self) -> None:
        """Play a game interactively until it ends or the players quit."""
        print(f"Welcome to tic-tac-toe!\n{INSTRUCTIONS}")
        print("Other commands: 'h' for help, 'q' to quit.")

        self.game.reset()

        while not self.game.is_game_over():
            print(self.game)
            side = self.game.active_side()

            try:
                user_input = self.input_func(f"Player {side} to move: ")
            except (EOFError, KeyboardInterrupt):
                print("\nQuitting game.")
                return

            command = user_input.strip().lower()
            if command in QUIT_COMMANDS:
                print("Quitting game.")
                return
            if command in HELP_COMMANDS:
                print(INSTRUCTIONS)
                continue

            coord = parse_move(command)
            if coord is None:
                print("I did not understand your move.")
                print(INSTRUCTIONS)
                continue

            if not self.game.attempt_move(coord):
                print(self.explain_rejection(coord))
                continue

            print(f"{side} moves: {coord}")

        print(self.game.render())
        print(self.describe_outcome())

    def explain_rejection(self, coord) -> str:
        """Describe why the engine rejected a move."""
        if not coord.is_on_board():
            return f"Your move is not valid: {coord} is not on the board."
        return "Your move is not valid, because that square is already occupied."

    def describe_outcome(self) -> str:
        outcome = self.game.current_outcome()
        if outcome.kind == OutcomeKind.WON:
            return f"The game ended in a win for {outcome.side}!"
        if outcome.kind == OutcomeKind.DRAW:
            return "The game ended in a draw..."
        return f"Game in progress, {outcome.side} to move."

    def show_moves(self, moves: str) -> int:
        """
        Apply a comma-separated move list and print the resulting position.

        Returns:
            0 if every move was applied, 1 otherwise
        """
        self.game.reset()
        tokens = [token.strip() for token in moves.split(',') if token.strip()] if moves else []

        for number, token in enumerate(tokens, start=1):
            coord = parse_move(token)
            if coord is None:
                print(f"Move {number} ({token!r}) could not be understood.")
                print(self.game)
                return 1
            if not self.game.attempt_move(coord):
                print(f"Move {number} ({token!r}) was rejected.")
                print(self.game)
                return 1

        print(self.game.render())
        print(self.describe_outcome())
        winning_line = self.game.get_winning_line()
        if winning_line:
            print("Winning line: " + " / ".join(str(coord) for coord in winning_line))
        return 0

    def benchmark(self, iterations: int) -> None:
        """Benchmark engine construction, random games and rendering."""
        iterations = max(1, iterations)
        print(f"Running benchmark with {iterations} iterations...")

        debug.start_timer("engine_init")
        for _ in range(iterations):
            GameEngine()
        init_time = debug.end_timer("engine_init", "cli")
        print(f"Engine initialization: {init_time:.6f} seconds total, "
              f"{init_time / iterations * 1000:.6f} ms per engine")

        results = {kind: 0 for kind in OutcomeKind}
        total_moves = 0
        debug.start_timer("game_simulation")
        for _ in range(iterations):
            game = GameEngine()
            while not game.is_game_over():
                game.attempt_move(random.choice(game.get_valid_moves()))
            results[game.current_outcome().kind] += 1
            total_moves += game.move_count
        simulation_time = debug.end_timer("game_simulation", "cli")
        print(f"Played {iterations} random games with {total_moves} total moves: "
              f"{simulation_time:.6f} seconds total, "
              f"{simulation_time / total_moves * 1000:.6f} ms per move")
        print("Results: " + ", ".join(f"{kind.name}={count}" for kind, count in results.items()))

        debug.start_timer("rendering")
        for _ in range(iterations):
            game.render()
        rendering_time = debug.end_timer("rendering", "cli")
        print(f"Rendering board {iterations} times: {rendering_time:.6f} seconds total, "
              f"{rendering_time / iterations * 1000:.6f} ms per render")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
