import random
import logging
from typing import Iterable, List, Optional

from gofish.config import MAX_COMPUTER_PASSES, SEED
from gofish.deck import Deck
from gofish.models import Value
from gofish.player import Player
from gofish.rounds import RoundResult, play_round, render_round

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s %(levelname)s %(name)s %(message)s'
)
logger = logging.getLogger(__name__)

TOTAL_CARDS = 52


class GameState:
    def __init__(self, human_player_name: str, opponent_names: Iterable[str], stock: Deck, rng) -> None:
        """
        Create the players and deal their first hands, human first and then
        each opponent in the given order.
        """
        self.stock = stock
        self.rng = rng
        self.game_over = False

        self.human_player = Player(human_player_name)
        self.human_player.get_next_hand(self.stock)

        self.opponents: List[Player] = []
        for name in opponent_names:
            player = Player(name)
            player.get_next_hand(self.stock)
            self.opponents.append(player)

        self.players: List[Player] = [self.human_player] + self.opponents

    def cards_in_play(self) -> int:
        """Cards in hands, in books and in the stock; always TOTAL_CARDS."""
        return (sum(len(p.cards) for p in self.players)
                + 4 * sum(len(p.books) for p in self.players)
                + self.stock.count)

    def random_player(self, current_player: Player, holding_cards: bool = False) -> Player:
        """
        Pick a player other than current_player uniformly at random.
        With holding_cards, players that still have cards are preferred.
        """
        others = [p for p in self.players if p is not current_player]
        if not others:
            raise RuntimeError("At least two players are needed to pick an opponent")
        if holding_cards:
            others = [p for p in others if p.cards] or others
        return others[self.rng.randrange(len(others))]

    def play_round(self, player: Player, player_to_ask: Player, value_to_ask_for: Value) -> RoundResult:
        result = play_round(player, player_to_ask, value_to_ask_for, self.stock)
        logger.debug(render_round(result).replace("\n", "; "))
        return result

    def winners(self) -> List[Player]:
        most = max(len(p.books) for p in self.players)
        return [p for p in self.players if len(p.books) == most]

    def check_for_winner(self) -> str:
        if any(p.cards for p in self.players):
            return ""
        self.game_over = True
        winners = self.winners()
        logger.info(f"Game over. Books: {[(p.name, len(p.books)) for p in self.players]}")
        if len(winners) == 1:
            return f"The winner is {winners[0].name}"
        return f"The winners are {' and '.join(p.name for p in winners)}"


class GameController:
    def __init__(self, human_player_name: str, computer_player_names: Iterable[str], rng=None) -> None:
        self.rng = rng if rng is not None else random.Random(SEED)
        self.rounds: List[RoundResult] = []
        self.computer_passes = 0
        self._game_state = GameState(human_player_name, list(computer_player_names),
                                     Deck().shuffle(self.rng), self.rng)
        names = ", ".join(p.name for p in self._game_state.players)
        self.status = f"Starting a new game with players {names}"
        logger.info(self.status)

    @property
    def game_state(self) -> GameState:
        return self._game_state

    @property
    def game_over(self) -> bool:
        return self._game_state.game_over

    @property
    def human_player(self) -> Player:
        return self._game_state.human_player

    @property
    def opponents(self) -> List[Player]:
        return list(self._game_state.opponents)

    @property
    def stock_count(self) -> int:
        return self._game_state.stock.count

    def next_round(self, player_to_ask: Player, value_to_ask_for: Value) -> str:
        """
        Play the human's round against player_to_ask, then let the computer
        players take their turns. Returns the narration of everything that
        happened followed by each player's hand and book counts.
        """
        state = self._game_state
        if player_to_ask not in state.players:
            raise ValueError(f"{player_to_ask.name} is not playing in this game")
        self.rounds = [state.play_round(state.human_player, player_to_ask, value_to_ask_for)]

        self.computer_passes = self.computer_players_play_next_round()

        lines = [render_round(r) + "\n" for r in self.rounds]
        status = "".join(lines)
        status += "\n".join(p.status for p in state.players)
        status += f"\nThe stock has {state.stock.count} cards"
        status += "\n" + state.check_for_winner()
        self.status = status
        return status

    def computer_players_play_next_round(self) -> int:
        """
        Every computer player with cards asks someone for a card. If the
        human is out of cards the passes repeat, playing the rest of the
        game out, bounded by MAX_COMPUTER_PASSES. Returns the passes played.
        """
        state = self._game_state
        passes = 0
        while passes < MAX_COMPUTER_PASSES:
            passes += 1
            with_cards = [p for p in state.opponents if p.cards]
            for player in with_cards:
                # an earlier round this pass may have emptied this hand
                if not player.cards:
                    continue
                player_to_ask = state.random_player(player, holding_cards=True)
                value = player.random_value_from_hand(self.rng)
                self.rounds.append(state.play_round(player, player_to_ask, value))
            if state.human_player.cards or not any(p.cards for p in state.opponents):
                break
        else:
            logger.warning(f"Computer players stopped after {passes} passes")
        return passes

    def new_game(self) -> None:
        """Start over with a freshly shuffled deck and the same players."""
        state = self._game_state
        self.status = "Starting a new game"
        self.rounds = []
        self.computer_passes = 0
        self._game_state = GameState(state.human_player.name,
                                     [p.name for p in state.opponents],
                                     Deck().shuffle(self.rng), self.rng)
        logger.info(f"{self.status} with players {', '.join(p.name for p in self._game_state.players)}")
