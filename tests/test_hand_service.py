import pytest

from models import Card
from services.hand_service import card_value, hand_value, is_busted, dealer_should_hit
from factories import make_hand


@pytest.mark.parametrize(
    "rank,expected",
    [("A", 11), ("2", 2), ("9", 9), ("10", 10), ("J", 10), ("Q", 10), ("K", 10)],
)
def test_card_value(rank: str, expected: int) -> None:
    assert card_value(Card(suit="H", rank=rank)) == expected


@pytest.mark.parametrize(
    "ranks,expected",
    [
        (("A", "K"), (21, False)),
        (("A", "A"), (12, True)),
        (("A", "A", "A", "A"), (14, True)),
        (("A", "9", "5"), (15, True)),
        (("K", "Q", "5"), (25, False)),
        (("7", "8"), (15, False)),
        ((), (0, False)),
    ],
)
def test_hand_value(ranks, expected) -> None:
    assert hand_value(make_hand(*ranks)) == expected


def test_soft_flag_means_an_ace_was_demoted() -> None:
    # textbook "soft 21" (ace still counted as 11) reports soft=False here
    assert hand_value(make_hand("A", "10")) == (21, False)
    assert hand_value(make_hand("A", "5", "10")) == (16, True)


def test_four_aces_not_busted() -> None:
    assert is_busted(make_hand("A", "A", "A", "A")) is False


def test_is_busted() -> None:
    assert is_busted(make_hand("K", "Q", "2")) is True
    assert is_busted(make_hand("K", "Q", "A")) is False


@pytest.mark.parametrize(
    "ranks,expected",
    [
        (("10", "6"), True),
        (("10", "7"), False),
        (("A", "6"), False),  # soft 17 stands
        (("A", "5"), True),
        (("K", "Q", "5"), False),
    ],
)
def test_dealer_should_hit(ranks, expected: bool) -> None:
    assert dealer_should_hit(make_hand(*ranks)) is expected
