from dataclasses import dataclass
from enum import Enum, IntEnum


class Value(IntEnum):
    Ace = 1
    Two = 2
    Three = 3
    Four = 4
    Five = 5
    Six = 6
    Seven = 7
    Eight = 8
    Nine = 9
    Ten = 10
    Jack = 11
    Queen = 12
    King = 13


class Suit(Enum):
    # order matters: a fresh deck is dealt suit by suit in this order
    Diamonds = 1
    Clubs = 2
    Hearts = 3
    Spades = 4


@dataclass(frozen=True)
class Card:
    value: Value
    suit: Suit

    @property
    def name(self) -> str:
        return f"{self.value.name} of {self.suit.name}"

    def __str__(self) -> str:
        return self.name


def compare_by_value(a: Card, b: Card) -> int:
    """Negative, zero or positive as a's value is below, equal to or above b's."""
    return int(a.value) - int(b.value)


def sort_key(card: Card):
    return (int(card.value), card.suit.value)


def plural(value: Value) -> str:
    if value == Value.Six:
        return "Sixes"
    return f"{value.name}s"


def s(count: int) -> str:
    return "" if count == 1 else "s"
