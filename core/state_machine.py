"""
狀態機：集中管理 Game.status 的轉換

合法轉換只有一條：
    playing -> finished

finished 是終點狀態。重新開始遊戲是 start 建立新的 Game 取代舊的，
不是狀態轉換。
"""
import logging

from models import Game, GameStatus
from core.exceptions import InvalidStateTransition

logger = logging.getLogger(__name__)


class GameStateMachine:
    TRANSITIONS = {
        GameStatus.PLAYING: {GameStatus.FINISHED},
        GameStatus.FINISHED: set(),
    }

    @classmethod
    def can_transition(cls, current: GameStatus, new_status: GameStatus) -> bool:
        return new_status in cls.TRANSITIONS[current]

    @classmethod
    def transition(cls, game: Game, new_status: GameStatus) -> Game:
        """
        轉換 Game 狀態

        異常：
            InvalidStateTransition: 非法轉換（例如 finished -> playing）
        """
        if not cls.can_transition(game.status, new_status):
            raise InvalidStateTransition(
                f"Cannot transition game from {game.status.value} to {new_status.value}"
            )

        logger.debug(f"Game status {game.status.value} -> {new_status.value}")
        game.status = new_status
        return game
