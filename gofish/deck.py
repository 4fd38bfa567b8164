from typing import Iterable, Iterator, List, Optional

from gofish.models import Card, Suit, Value


def fresh_cards() -> List[Card]:
    return [Card(value, suit) for suit in Suit for value in Value]


class Deck:
    """Ordered stock of cards. Cards are dealt from the front."""

    def __init__(self, cards: Optional[Iterable[Card]] = None) -> None:
        self._cards: List[Card] = list(cards) if cards is not None else fresh_cards()

    def shuffle(self, rng) -> "Deck":
        """
        Return a new deck holding the same cards in random order.
        Each step picks one of the remaining cards with rng.randrange, so
        every permutation is equally likely for a uniform rng.
        """
        remaining = list(self._cards)
        shuffled: List[Card] = []
        while remaining:
            shuffled.append(remaining.pop(rng.randrange(len(remaining))))
        return Deck(shuffled)

    def draw(self, n: int) -> List[Card]:
        if n <= 0:
            return []
        drawn = self._cards[:n]
        del self._cards[:n]
        return drawn

    @property
    def count(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards))

    def __repr__(self) -> str:
        return f"Deck({self.count} cards)"
