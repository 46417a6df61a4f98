"""
API Request / Response schemas（Pydantic）

GameStateResponse 的欄位順序就是 JSON 輸出的順序：
dealer, players, results, turn, status
"""
from typing import List, Optional

from pydantic import BaseModel, StrictInt, StrictStr, field_validator

from models import Card, Hand, Game


class ActionSubmit(BaseModel):
    """
    玩家動作 body

    缺少或為 null 的欄位取零值（player=0, action=""），
    由 GameManager 依序檢查；型別錯誤（例如 "1"）才算 body 格式錯誤。
    action 保持字串：未知動作要回傳 "Unknown action"（400），不是 schema 驗證錯誤
    """
    player: Optional[StrictInt] = 0
    action: Optional[StrictStr] = ""

    @field_validator("player", mode="after")
    @classmethod
    def null_player_is_zero(cls, v):
        return 0 if v is None else v

    @field_validator("action", mode="after")
    @classmethod
    def null_action_is_empty(cls, v):
        return "" if v is None else v


class CardResponse(BaseModel):
    suit: str
    value: str

    @classmethod
    def from_card(cls, card: Card) -> "CardResponse":
        return cls(suit=card.suit, value=card.rank)


class HandResponse(BaseModel):
    cards: List[CardResponse]
    done: bool
    busted: bool

    @classmethod
    def from_hand(cls, hand: Hand) -> "HandResponse":
        return cls(
            cards=[CardResponse.from_card(c) for c in hand.cards],
            done=hand.done,
            busted=hand.busted
        )


class GameStateResponse(BaseModel):
    dealer: HandResponse
    players: List[HandResponse]
    results: List[str]
    turn: int
    status: str

    @classmethod
    def from_game(cls, game: Game) -> "GameStateResponse":
        """建立快照（deck 不對外公開）"""
        return cls(
            dealer=HandResponse.from_hand(game.dealer),
            players=[HandResponse.from_hand(p) for p in game.players],
            results=[r.value for r in game.results],
            turn=game.turn,
            status=game.status.value
        )
