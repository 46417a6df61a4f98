import pytest

from core.exceptions import InvalidStateTransition
from core.state_machine import GameStateMachine
from models import Game, GameStatus


def test_playing_to_finished() -> None:
    game = Game(deck=[])
    GameStateMachine.transition(game, GameStatus.FINISHED)
    assert game.status == GameStatus.FINISHED


@pytest.mark.parametrize("target", [GameStatus.PLAYING, GameStatus.FINISHED])
def test_finished_is_terminal(target: GameStatus) -> None:
    game = Game(deck=[], status=GameStatus.FINISHED)
    with pytest.raises(InvalidStateTransition):
        GameStateMachine.transition(game, target)
    assert game.status == GameStatus.FINISHED


def test_playing_to_playing_rejected() -> None:
    assert GameStateMachine.can_transition(GameStatus.PLAYING, GameStatus.PLAYING) is False
