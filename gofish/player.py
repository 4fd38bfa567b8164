from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List

from gofish.config import HAND_SIZE
from gofish.deck import Deck
from gofish.models import Card, Value, s, sort_key


@dataclass(eq=False)
class Player:
    name: str
    # unordered; use .hand for the sorted view
    cards: List[Card] = field(default_factory=list)
    books: List[Value] = field(default_factory=list)
    hand_size: int = HAND_SIZE

    @property
    def hand(self) -> List[Card]:
        return sorted(self.cards, key=sort_key)

    @property
    def status(self) -> str:
        n_cards = len(self.cards)
        n_books = len(self.books)
        return f"{self.name} has {n_cards} card{s(n_cards)} and {n_books} book{s(n_books)}"

    def values_in_hand(self) -> List[Value]:
        return sorted({card.value for card in self.cards})

    def count_of(self, value: Value) -> int:
        return sum(1 for card in self.cards if card.value == value)

    def get_next_hand(self, stock: Deck) -> int:
        """
        Refill an empty hand from the stock. Draws up to hand_size cards
        (fewer if the stock runs short) and returns how many were drawn.
        """
        if self.cards:
            return 0
        drawn = stock.draw(self.hand_size)
        self.add_cards_and_pull_out_books(drawn)
        return len(drawn)

    def do_you_have_any(self, value: Value, stock: Deck) -> List[Card]:
        matching = [card for card in self.cards if card.value == value]
        if not matching:
            return []
        self.cards = [card for card in self.cards if card.value != value]
        if not self.cards:
            self.get_next_hand(stock)
        return sorted(matching, key=sort_key)

    def add_cards_and_pull_out_books(self, cards: Iterable[Card]) -> List[Value]:
        self.cards.extend(cards)
        return self.pull_out_books()

    def pull_out_books(self) -> List[Value]:
        counts = Counter(card.value for card in self.cards)
        new_books = sorted(value for value, cnt in counts.items() if cnt >= 4)
        if new_books:
            self.cards = [card for card in self.cards if card.value not in new_books]
            self.books.extend(new_books)
        return new_books

    def draw_card(self, stock: Deck) -> List[Value]:
        return self.add_cards_and_pull_out_books(stock.draw(1))

    def random_value_from_hand(self, rng) -> Value:
        values = self.values_in_hand()
        if not values:
            raise RuntimeError(f"{self.name} has no cards to choose a value from")
        return values[rng.randrange(len(values))]

    def __str__(self) -> str:
        return self.name
