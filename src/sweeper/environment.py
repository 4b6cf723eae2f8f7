"""
Gymnasium environment wrapper for the Minesweeper engine.

Provides a standard RL interface where every action is a player reveal.
"""
from typing import Any, Dict, List, Optional, Sequence, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, Coordinate, RevealResult
from .render import render_grid


# ============================================================================
# Minesweeper Environment
# ============================================================================

class CascadeEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - -3 = question-marked cell
        - 0-8 = revealed cell with adjacent mine count

    Actions:
        Discrete action space of size width * height.
        Action i corresponds to cell at (i // width, i % width).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed, or game over)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        num_mines: int = 10,
        mines: Optional[Sequence[Coordinate]] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board dimensions (default: 8x8).
            num_mines: Mines sampled on every reset when no layout is given.
            mines: Fixed mine layout used on every reset instead.
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        if not self.config.within_limits:
            raise ValueError(
                f"Board size {self.config.height}x{self.config.width} "
                f"is outside the supported limits"
            )

        self.mines = list(mines) if mines is not None else None
        if self.mines is not None:
            off_board = [
                (row, col) for row, col in self.mines
                if not (0 <= row < self.config.height
                        and 0 <= col < self.config.width)
            ]
            if off_board:
                raise ValueError(f"Mine positions off the board: {off_board}")
            num_mines = len(set(self.mines))
        self.num_mines = num_mines
        max_mines = self.config.total_cells - 1
        if not 0 <= self.num_mines <= max_mines:
            raise ValueError(f"Mine count must be between 0 and {max_mines}")

        self.board = Board(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-3,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0
        self._last_result: Optional[RevealResult] = None

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for the mine layout.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.board.reset()
        self.board.place_mines(self.mines or self._sample_mines())
        self._steps = 0
        self._last_result = None

        return self.board.get_observation(), self._get_info()

    def _sample_mines(self) -> List[Coordinate]:
        """Draw distinct mine positions from the seeded generator."""
        flat = self.np_random.choice(
            self.config.total_cells, size=self.num_mines, replace=False
        )
        return [self._action_to_position(int(index)) for index in flat]

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (row * width + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)
        observation = self.board.get_observation()
        terminated = self.board.is_lost or self.board.is_won
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _action_to_position(self, action: int) -> Coordinate:
        """Convert flat action index to (row, col) position."""
        return action // self.config.width, action % self.config.width

    def _calculate_reward(self, row: int, col: int) -> float:
        """
        Reveal a cell and score the outcome.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            Reward value.
        """
        if self.board.is_lost or self.board.is_won:
            self._last_result = None
            return -0.1

        self._last_result = self.board.reveal(row, col)

        if self._last_result == RevealResult.HIT_MINE:
            return -10.0
        if self._last_result != RevealResult.REVEALED:
            return -0.1
        if self.board.is_won:
            return 10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "cleared": self.board.cleared_cells,
            "total_safe": self.board.safe_cells,
            "last_result": self._last_result.name if self._last_result else None,
            "game_state": self.board.game_state.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_grid(self.board)
        if self.render_mode == "human":
            print(render_grid(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = hidden cell.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.board.get_hidden_positions():
            mask[row * self.config.width + col] = True
        return mask
