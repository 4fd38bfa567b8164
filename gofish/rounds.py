"""
One ask-and-answer exchange between two players and the stock.

play_round does the bookkeeping and returns a RoundResult; render_round turns
that record into the narration shown to the human player.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from gofish.deck import Deck
from gofish.models import Value, plural, s
from gofish.player import Player


class Outcome(Enum):
    TRANSFER = "transfer"        # target handed over its matching cards
    STOCK_EMPTY = "stock_empty"  # nothing to hand over and nothing to draw
    DREW = "drew"                # go fish: asker drew one card


@dataclass
class RoundResult:
    asker: str
    target: str
    value: Value
    outcome: Outcome
    cards_received: int = 0
    books_made: List[Value] = field(default_factory=list)
    # asker emptied its hand and refilled from the stock
    replenished: bool = False
    replenish_count: int = 0
    # target gave away its last cards and refilled from the stock
    target_replenished: bool = False
    target_replenish_count: int = 0


def play_round(player: Player, player_to_ask: Player, value: Value, stock: Deck) -> RoundResult:
    if player is player_to_ask:
        raise ValueError(f"{player.name} cannot ask themselves for cards")

    target_had = len(player_to_ask.cards)
    books_before = len(player.books)
    cards = player_to_ask.do_you_have_any(value, stock)
    result = RoundResult(asker=player.name, target=player_to_ask.name, value=value,
                         outcome=Outcome.STOCK_EMPTY)
    if cards and len(cards) == target_had:
        result.target_replenished = True
        result.target_replenish_count = len(player_to_ask.cards)

    if cards:
        player.add_cards_and_pull_out_books(cards)
        result.outcome = Outcome.TRANSFER
        result.cards_received = len(cards)
    elif stock.count == 0:
        result.outcome = Outcome.STOCK_EMPTY
    else:
        player.draw_card(stock)
        result.outcome = Outcome.DREW

    if not player.cards:
        result.replenished = True
        result.replenish_count = player.get_next_hand(stock)

    # includes books completed by the refill
    result.books_made = player.books[books_before:]
    return result


def render_round(result: RoundResult) -> str:
    lines = [f"{result.asker} has asked {result.target} for {plural(result.value)}"]
    if result.outcome is Outcome.TRANSFER:
        n = result.cards_received
        lines.append(f"{result.target} has {n} {result.value.name} card{s(n)}")
    elif result.outcome is Outcome.STOCK_EMPTY:
        lines.append("The stock is out of cards")
    else:
        lines.append(f"{result.asker} drew a card")
    if result.replenished:
        lines.append(f"{result.asker} ran out of cards, drew {result.replenish_count} from the stock")
    return "\n".join(lines)
