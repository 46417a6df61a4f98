from models import PlayerResult
from services.result_service import calculate_result, calculate_results
from factories import make_hand, make_game


def test_busted_player_loses_even_if_dealer_busts() -> None:
    player = make_hand("K", "Q", "5")
    player.busted = True
    assert calculate_result(player, dealer_total=25) == PlayerResult.BUST


def test_dealer_bust_means_win() -> None:
    assert calculate_result(make_hand("10", "2"), dealer_total=22) == PlayerResult.WIN


def test_higher_total_wins() -> None:
    assert calculate_result(make_hand("10", "9"), dealer_total=18) == PlayerResult.WIN


def test_lower_total_loses() -> None:
    assert calculate_result(make_hand("10", "7"), dealer_total=18) == PlayerResult.LOSE


def test_equal_total_pushes() -> None:
    assert calculate_result(make_hand("9", "9"), dealer_total=18) == PlayerResult.PUSH


def test_only_busted_flag_counts() -> None:
    # over 21 without the busted flag is scored as a normal total
    assert calculate_result(make_hand("K", "Q", "5"), dealer_total=20) == PlayerResult.WIN


def test_calculate_results_writes_back() -> None:
    game = make_game(
        deck_ranks=[],
        players=[["10", "9"], ["10", "7"], ["9", "9"]],
        dealer=["10", "8"],
    )

    results = calculate_results(game)

    assert results == [PlayerResult.WIN, PlayerResult.LOSE, PlayerResult.PUSH]
    assert game.results == results
