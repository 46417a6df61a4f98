"""
Game Manager：管理每個房間的遊戲生命週期

職責：
1. 開始遊戲（建立牌組、發初始牌）
2. 處理玩家動作（hit / stand）、推進回合
3. 所有玩家結束後執行 Dealer 規則並結算
4. 查詢遊戲狀態

原則：
- 所有操作經過 @serialized，整個操作期間持有全域鎖
- 先驗證、再修改：驗證失敗時 Game 完全不變
- 狀態變更只經過 GameStateMachine
- 回傳在鎖內建立的快照（GameStateResponse），不回傳可變的 Game
"""
import logging
import random
from typing import Optional

from models import Game, Hand, GameStatus, PlayerAction, PLAYER_COUNT, DEALER_TURN
from schemas import GameStateResponse
from core.registry import registry
from core.locks import serialized
from core.state_machine import GameStateMachine
from core.exceptions import (
    MissingRoomId,
    GameNotFound,
    InvalidGameState,
    InvalidPlayerIndex,
    PlayerAlreadyDone,
    UnknownAction
)
from services.deck_service import new_deck, deal_card
from services.hand_service import hand_value, is_busted, dealer_should_hit
from services.result_service import calculate_results

logger = logging.getLogger(__name__)


class GameManager:
    """遊戲生命週期管理器"""

    @staticmethod
    @serialized
    def start_game(room_id: str, rng: Optional[random.Random] = None) -> GameStateResponse:
        """
        開始新遊戲（同一房間的舊遊戲直接丟棄）

        流程：
        1. 建立洗好的牌組
        2. 發兩輪牌：player0, player1, player2, dealer
        3. results 全部是 Playing，turn=0，status=playing
        4. 存入 registry

        參數：
            room_id: 房間 id（任意非空字串）
            rng: 洗牌用的亂數產生器（測試用）

        返回：
            新遊戲的快照

        異常：
            MissingRoomId: room_id 是空字串
        """
        if not room_id:
            raise MissingRoomId()

        game = Game(deck=new_deck(rng))
        for _ in range(2):
            for player in game.players:
                deal_card(game, player)
            deal_card(game, game.dealer)

        replaced = room_id in registry
        registry.put(room_id, game)

        logger.info(
            f"Started game for room {room_id}"
            + (" (replaced previous game)" if replaced else "")
        )
        return GameStateResponse.from_game(game)

    @staticmethod
    @serialized
    def submit_action(room_id: str, player_index: int, action: str) -> GameStateResponse:
        """
        處理玩家動作

        前置條件（依序檢查，任何一項失敗都不修改狀態）：
        1. 遊戲存在
        2. 遊戲狀態是 playing
        3. 0 <= player_index <= 2
        4. 該玩家還沒結束
        5. action 是 hit 或 stand

        流程：
        1. hit：發一張牌，超過 21 點則 busted + done
           stand：done
        2. turn 移到第一個還沒結束的玩家
        3. 全部結束：Dealer 要牌到 >= 17，status -> finished，turn=3，結算

        注意：
            玩家不需要照 turn 的順序行動，只有 done 會擋住動作

        異常：
            GameNotFound, InvalidGameState, InvalidPlayerIndex,
            PlayerAlreadyDone, UnknownAction
        """
        # 1. 驗證
        game = registry.get(room_id)
        if game is None:
            raise GameNotFound(room_id)

        if game.status != GameStatus.PLAYING:
            raise InvalidGameState(room_id)

        if not 0 <= player_index < PLAYER_COUNT:
            raise InvalidPlayerIndex(player_index)

        player = game.players[player_index]
        if player.done:
            raise PlayerAlreadyDone(player_index)

        if action not in (PlayerAction.HIT.value, PlayerAction.STAND.value):
            raise UnknownAction(action)

        # 2. 執行動作
        if action == PlayerAction.HIT.value:
            card = deal_card(game, player)
            if is_busted(player):
                player.busted = True
                player.done = True
            logger.info(
                f"Room {room_id}: player {player_index} hit {card.rank}{card.suit}"
                f" -> {hand_value(player)[0]}" + (" (bust)" if player.busted else "")
            )
        else:
            player.done = True
            logger.info(f"Room {room_id}: player {player_index} stands")

        # 3. 推進回合
        GameManager._advance_turn(room_id, game)

        return GameStateResponse.from_game(game)

    @staticmethod
    @serialized
    def get_state(room_id: str) -> GameStateResponse:
        """
        取得遊戲狀態快照（唯讀）

        異常：
            GameNotFound: 房間沒有遊戲
        """
        game = registry.get(room_id)
        if game is None:
            raise GameNotFound(room_id)
        return GameStateResponse.from_game(game)

    @staticmethod
    def _advance_turn(room_id: str, game: Game) -> None:
        # 呼叫者必須已持有 registry_lock
        for i, player in enumerate(game.players):
            if not player.done:
                game.turn = i
                return

        GameManager._play_dealer(game.dealer, game)
        GameStateMachine.transition(game, GameStatus.FINISHED)
        game.turn = DEALER_TURN
        results = calculate_results(game)

        logger.info(
            f"Room {room_id} finished: dealer {hand_value(game.dealer)[0]}, "
            f"results {[r.value for r in results]}"
        )

    @staticmethod
    def _play_dealer(dealer: Hand, game: Game) -> None:
        # 每張牌至少 1 點，迴圈必定結束
        while dealer_should_hit(dealer):
            deal_card(game, dealer)
