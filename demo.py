#!/usr/bin/env python3
"""
Replay random reveals on seeded boards.

Every step reports the reveal result and how many cells the cascade
opened; the board is drawn when a game ends.
"""
import argparse
from collections import Counter

import numpy as np

from src.sweeper.board import BoardConfig, RevealResult
from src.sweeper.environment import CascadeEnv


def play_game(env: CascadeEnv, seed: int) -> Counter:
    """Reveal random hidden cells until the game ends, tallying results."""
    env.reset(seed=seed)
    env.action_space.seed(seed)
    results: Counter = Counter()

    terminated = False
    while not terminated:
        mask = env.get_action_mask().astype(np.int8)
        action = int(env.action_space.sample(mask=mask))
        _, reward, terminated, _, info = env.step(action)

        result = info["last_result"]
        opened = len(env.board.visited) if result == RevealResult.REVEALED.name else 0
        results[result] += 1
        print(
            f"  step {info['steps']:>3}  reveal {divmod(action, env.config.width)}"
            f"  {result:<16} opened {opened:>4}  reward {reward:+.1f}"
        )

    print(env.render())
    print(f"  {env.board.game_state.name}: cleared "
          f"{env.board.cleared_cells}/{env.board.safe_cells}")
    return results


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--games", type=int, default=3, help="Number of games")
    parser.add_argument("--size", type=int, default=8, help="Board size (NxN), 8-50")
    parser.add_argument("--mines", type=int, default=10, help="Mines per board")
    parser.add_argument("--seed", type=int, default=0, help="Seed of the first game")
    args = parser.parse_args()

    config = BoardConfig(args.size, args.size)
    if not config.within_limits:
        parser.error(f"Board size {args.size} is outside the supported limits")
    env = CascadeEnv(config=config, num_mines=args.mines, render_mode="ansi")

    totals: Counter = Counter()
    won = 0
    for game in range(args.games):
        print(f"\nGame {game + 1} (seed {args.seed + game})")
        totals += play_game(env, args.seed + game)
        won += env.board.is_won

    print(f"\nWon {won}/{args.games}")
    for name, count in totals.most_common():
        print(f"  {name:<16} {count}")


if __name__ == "__main__":
    main()
