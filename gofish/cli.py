"""
Auto-play driver: the human seat makes uniform-random choices, the same way
the computer players do, and the status is printed after every round.
"""

import random
import logging
import argparse
from typing import List, Optional

from gofish.config import SEED, TableConfig, load_table
from gofish.game import GameController
from gofish.models import Value

logger = logging.getLogger(__name__)


def play_game(controller: GameController, rng: random.Random, max_rounds: int) -> int:
    """Play rounds until the game is over or max_rounds is reached; returns rounds played."""
    rounds = 0
    while not controller.game_over and rounds < max_rounds:
        human = controller.human_player
        target = controller.game_state.random_player(human, holding_cards=True)
        if human.cards:
            value = human.random_value_from_hand(rng)
        else:
            # empty hand and empty stock; any value just passes the turn
            value = rng.choice(list(Value))
        print(controller.next_round(target, value))
        print("-" * 50)
        rounds += 1
    return rounds


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play Go Fish against computer players")
    parser.add_argument("--human", help="Name of the human player")
    parser.add_argument("--opponents", nargs="+", help="Names of the computer players")
    parser.add_argument("--table", help="YAML file with 'human' and 'opponents' keys")
    parser.add_argument("--seed", type=int, default=SEED, help="Random seed for a reproducible game")
    parser.add_argument("--max-rounds", type=int, default=200, help="Stop after this many human rounds (default: 200)")
    parser.add_argument("--games", type=int, default=1, help="Number of games to play (default: 1)")
    args = parser.parse_args(argv)

    table = load_table(args.table) if args.table else TableConfig()
    human = args.human or table.human
    opponents = args.opponents or table.opponents

    rng = random.Random(args.seed)
    controller = GameController(human, opponents, rng=rng)
    print(controller.status)
    for game_no in range(1, args.games + 1):
        if game_no > 1:
            controller.new_game()
            print(controller.status)
        played = play_game(controller, rng, args.max_rounds)
        logger.info(f"Game {game_no} finished after {played} rounds (over: {controller.game_over})")
    return 0
