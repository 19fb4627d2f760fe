"""
rules.py - Game engine and Gymnasium environment for tic-tac-toe

This module provides:
1. GameEngine, which owns the board and the outcome and is the only place a
   move can be applied
2. A gymnasium-compatible environment wrapping the engine
"""

from typing import Any, Dict, List, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from tictactoe.debug import debug
from tictactoe.game.board import Board
from tictactoe.game.coordinate import Coordinate, as_coordinate
from tictactoe.utils import (BOARD_SIZE, CELL_COUNT, FIRST_SIDE, WIN_LINES,
                             Outcome, OutcomeKind, Side, evaluate_outcome,
                             find_winning_line)


class GameEngine:
    """
    Tic-tac-toe game state and rules.

    The engine holds one board and one Outcome. The side to move is the side
    of an in-progress outcome, so a finished game cannot also have a side to
    move. Illegal moves are rejected by returning False; nothing here raises
    for a bad move.
    """

    def __init__(self):
        """Start a new game with an empty board."""
        debug.debug("Initializing GameEngine", "engine")
        self.board = Board()
        self.outcome = Outcome.in_progress(FIRST_SIDE)

    def reset(self) -> None:
        """Discard the current game and start a fresh one."""
        debug.debug("Resetting game", "engine")
        self.board.reset()
        self.outcome = Outcome.in_progress(FIRST_SIDE)

    def is_legal_move(self, coord: Any) -> bool:
        """
        Check if a move is legal.

        Args:
            coord: Coordinate, (row, col) pair or (Vert, Hor) pair

        Returns:
            True if the game is in progress and the cell is on the board and empty
        """
        if self.outcome.is_game_over():
            debug.debug(f"Illegal move: game is over ({self.outcome})", "engine")
            return False

        target = as_coordinate(coord)
        if target is None or not target.is_on_board():
            debug.debug(f"Illegal move: {coord!r} is not a cell", "engine")
            return False

        if not self.board.is_empty(target):
            debug.debug(f"Illegal move: {target} is occupied", "engine")
            return False

        return True

    def attempt_move(self, coord: Any) -> bool:
        """
        Place the side to move at the given cell if the move is legal.

        Args:
            coord: Coordinate, (row, col) pair or (Vert, Hor) pair

        Returns:
            True if the move was applied, False if it was rejected
        """
        if not self.is_legal_move(coord):
            return False

        target = as_coordinate(coord)
        side = self.outcome.side
        debug.debug(f"{side} moves: {target}", "engine")
        self.board.place(target, side)

        self.outcome = evaluate_outcome(self.board.grid, side.other())
        if self.outcome.kind == OutcomeKind.WON:
            debug.info(f"{side} wins after move at {target}", "engine")
        elif self.outcome.kind == OutcomeKind.DRAW:
            debug.info(f"Game ends in a draw after {self.move_count} moves", "engine")

        return True

    def current_outcome(self) -> Outcome:
        return self.outcome

    def active_side(self) -> Side:
        """
        Side whose turn it is.

        Once the game is over the turn no longer advances, so this is the side
        that made the final move.
        """
        if not self.outcome.is_game_over():
            return self.outcome.side
        if self.outcome.kind == OutcomeKind.WON:
            return self.outcome.side
        # Draw: the first side moved last iff it holds one more mark
        if self.board.count(FIRST_SIDE) > self.board.count(FIRST_SIDE.other()):
            return FIRST_SIDE
        return FIRST_SIDE.other()

    def cell_at(self, coord: Any) -> Optional[Side]:
        """
        Get the content of a cell.

        Returns:
            The occupying side, or None for an empty cell or anything that
            does not name a board cell
        """
        target = as_coordinate(coord)
        if target is None:
            return None
        return self.board.cell_at(target)

    @property
    def move_count(self) -> int:
        return self.board.occupied_count()

    @property
    def last_move(self) -> Optional[Coordinate]:
        return self.board.last_move

    def is_game_over(self) -> bool:
        return self.outcome.is_game_over()

    def get_winner(self) -> Optional[Side]:
        return self.outcome.winner

    def get_valid_moves(self) -> List[Coordinate]:
        """
        Get the cells the side to move may play.

        Returns:
            Empty cells in row order, or an empty list once the game is over
        """
        if self.outcome.is_game_over():
            return []
        return self.board.empty_cells()

    def get_winning_line(self) -> List[Coordinate]:
        """
        Get the completed line if the game is won.

        Returns:
            The three coordinates of the winning line, or an empty list
        """
        if self.outcome.kind != OutcomeKind.WON:
            return []

        line_index = find_winning_line(self.board.grid)
        if line_index is None:
            return []
        return [Coordinate(row, col) for row, col in WIN_LINES[line_index]]

    def get_state(self) -> np.ndarray:
        return self.board.get_state()

    def render(self) -> str:
        return self.board.render()

    def __str__(self) -> str:
        if self.outcome.is_game_over():
            status = f"Game over: {self.outcome}"
        else:
            status = f"It is {self.outcome.side}'s turn."
        return f"{status}\n{self.render()}"


class TicTacToeEnv(gym.Env):
    """
    Tic-tac-toe environment following the Gymnasium interface.

    Both sides act through step() in turn. Actions are flat cell indices
    (row * 3 + col) and rewards are given from the first side's perspective.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None):
        """
        Initialize the environment.

        Args:
            render_mode: Mode for rendering the environment
        """
        debug.debug("Initializing TicTacToeEnv", "env")

        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.action_space = spaces.Discrete(CELL_COUNT)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(BOARD_SIZE, BOARD_SIZE), dtype=np.int8
        )

        self.engine = GameEngine()
        self.render_mode = render_mode

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Reset the environment to initial state.

        Args:
            seed: Random seed for reproducibility
            options: Additional options for reset

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)
        self.engine.reset()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Take a step in the environment by making a move for the side to move.

        Args:
            action: Cell index (0-8)

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")

        coord = self._action_to_coordinate(action)
        if coord is None or not self.engine.attempt_move(coord):
            debug.warning(f"Invalid action: {action}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = False
        outcome = self.engine.current_outcome()

        if outcome.kind == OutcomeKind.WON:
            reward = self.reward_win if outcome.side == Side.FIRST else self.reward_lose
            terminated = True
        elif outcome.kind == OutcomeKind.DRAW:
            reward = self.reward_draw
            terminated = True

        if terminated:
            debug.info(f"Game over: {outcome}", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        """
        Render the current state of the environment.

        Returns:
            The board text in 'ascii' mode, None otherwise
        """
        if self.render_mode == "ascii":
            return self.engine.render()

        if self.render_mode == "human":
            print(self.engine.render())

        return None

    @staticmethod
    def _action_to_coordinate(action: Any) -> Optional[Coordinate]:
        try:
            return Coordinate.from_index(action)
        except ValueError:
            return None

    def _get_observation(self) -> np.ndarray:
        return self.engine.get_state()

    def _get_info(self) -> Dict:
        """
        Get additional information about the current state.

        Returns:
            Dictionary with info about the current state
        """
        valid_moves = [coord.index for coord in self.engine.get_valid_moves()]
        last_move = self.engine.last_move

        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'active_side': self.engine.active_side().name,
            'outcome': self.engine.current_outcome().kind.name,
            'moves_made': self.engine.move_count,
            'winning_line': [coord.index for coord in self.engine.get_winning_line()],
            'last_move': last_move.index if last_move is not None else None,
        }

    def close(self):
        """Clean up resources."""
