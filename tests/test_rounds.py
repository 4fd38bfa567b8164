import pytest

from gofish.deck import Deck
from gofish.models import Card, Suit, Value
from gofish.player import Player
from gofish.rounds import Outcome, RoundResult, play_round, render_round


def make_player(name, *cards):
    return Player(name, cards=list(cards))


def test_transfer():
    stock = Deck()
    owen = make_player("Owen", Card(Value.Six, Suit.Clubs), Card(Value.Two, Suit.Clubs))
    brittney = make_player("Brittney", Card(Value.Six, Suit.Hearts), Card(Value.Six, Suit.Spades),
                           Card(Value.Nine, Suit.Clubs))
    result = play_round(owen, brittney, Value.Six, stock)
    assert result.outcome is Outcome.TRANSFER
    assert result.cards_received == 2
    assert owen.count_of(Value.Six) == 3
    assert brittney.count_of(Value.Six) == 0
    assert stock.count == 52
    assert not result.replenished
    assert render_round(result) == "Owen has asked Brittney for Sixes\nBrittney has 2 Six cards"


def test_transfer_completes_book_and_replenishes():
    stock = Deck()
    owen = make_player("Owen", *[Card(Value.King, s) for s in (Suit.Diamonds, Suit.Clubs, Suit.Hearts)])
    brittney = make_player("Brittney", Card(Value.King, Suit.Spades), Card(Value.Two, Suit.Spades))
    result = play_round(owen, brittney, Value.King, stock)
    assert result.books_made == [Value.King]
    assert owen.books == [Value.King]
    assert result.replenished
    assert result.replenish_count == 5
    assert len(owen.cards) == 5
    assert render_round(result) == (
        "Owen has asked Brittney for Kings\n"
        "Brittney has 1 King card\n"
        "Owen ran out of cards, drew 5 from the stock"
    )


def test_target_runs_out_and_refills():
    stock = Deck()
    owen = make_player("Owen", Card(Value.Two, Suit.Clubs))
    brittney = make_player("Brittney", Card(Value.Two, Suit.Hearts))
    result = play_round(owen, brittney, Value.Two, stock)
    assert result.target_replenished
    assert result.target_replenish_count == 5
    assert len(brittney.cards) == 5
    assert stock.count == 47


def test_go_fish_draws_one():
    stock = Deck()
    owen = make_player("Owen", Card(Value.Seven, Suit.Clubs))
    brittney = make_player("Brittney", Card(Value.Two, Suit.Hearts))
    result = play_round(owen, brittney, Value.Seven, stock)
    assert result.outcome is Outcome.DREW
    assert len(owen.cards) == 2
    assert stock.count == 51
    assert render_round(result) == "Owen has asked Brittney for Sevens\nOwen drew a card"


def test_stock_empty():
    stock = Deck([])
    owen = make_player("Owen", Card(Value.Seven, Suit.Clubs))
    brittney = make_player("Brittney", Card(Value.Two, Suit.Hearts))
    result = play_round(owen, brittney, Value.Seven, stock)
    assert result.outcome is Outcome.STOCK_EMPTY
    assert len(owen.cards) == 1
    assert render_round(result) == "Owen has asked Brittney for Sevens\nThe stock is out of cards"


def test_empty_asker_with_empty_stock_draws_zero():
    stock = Deck([])
    owen = make_player("Owen")
    brittney = make_player("Brittney", Card(Value.Two, Suit.Hearts))
    result = play_round(owen, brittney, Value.Ace, stock)
    assert result.replenished
    assert result.replenish_count == 0
    assert render_round(result).endswith("Owen ran out of cards, drew 0 from the stock")


def test_asking_yourself_is_rejected():
    owen = make_player("Owen", Card(Value.Two, Suit.Clubs))
    with pytest.raises(ValueError):
        play_round(owen, owen, Value.Two, Deck())


def test_render_is_independent_of_players():
    result = RoundResult(asker="A", target="B", value=Value.Ace, outcome=Outcome.TRANSFER, cards_received=1)
    assert render_round(result) == "A has asked B for Aces\nB has 1 Ace card"


def test_books_from_refill_are_recorded():
    stock = Deck([Card(Value.Ace, s) for s in Suit] + [Card(Value.Two, Suit.Clubs)])
    owen = make_player("Owen", *[Card(Value.King, s) for s in (Suit.Diamonds, Suit.Clubs, Suit.Hearts)])
    brittney = make_player("Brittney", Card(Value.King, Suit.Spades), Card(Value.Two, Suit.Spades))
    result = play_round(owen, brittney, Value.King, stock)
    assert owen.books == [Value.King, Value.Ace]
    assert result.books_made == [Value.King, Value.Ace]
    assert result.replenish_count == 5
    assert owen.hand == [Card(Value.Two, Suit.Clubs)]
    assert stock.count == 0


def test_book_from_go_fish_draw_is_recorded():
    stock = Deck([Card(Value.Nine, Suit.Spades), Card(Value.Three, Suit.Clubs)])
    owen = make_player("Owen", *[Card(Value.Nine, s) for s in (Suit.Diamonds, Suit.Clubs, Suit.Hearts)],
                       Card(Value.Four, Suit.Clubs))
    brittney = make_player("Brittney", Card(Value.Two, Suit.Spades))
    result = play_round(owen, brittney, Value.Four, stock)
    assert result.outcome is Outcome.DREW
    assert result.books_made == [Value.Nine]
    assert not result.replenished
