"""
資料模型：Card、Hand、Game

全部存在記憶體中（沒有資料庫），由 core.registry 以 room_id 為 key 管理
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List

SUITS = ["S", "H", "D", "C"]
RANKS = ["A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K"]

PLAYER_COUNT = 3
DEALER_TURN = 3  # turn == 3 表示輪到 Dealer（所有玩家都結束了）
BLACKJACK = 21
DEALER_STAND_VALUE = 17


class GameStatus(str, Enum):
    PLAYING = "playing"
    FINISHED = "finished"


class PlayerResult(str, Enum):
    PLAYING = "Playing"
    WIN = "Win"
    LOSE = "Lose"
    BUST = "Bust"
    PUSH = "Push"


class PlayerAction(str, Enum):
    HIT = "hit"
    STAND = "stand"


@dataclass(frozen=True)
class Card:
    suit: str  # "S","H","D","C"
    rank: str  # "A","2".."10","J","Q","K"


@dataclass
class Hand:
    cards: List[Card] = field(default_factory=list)
    done: bool = False  # 已經 Stand 或 Bust，不能再行動
    busted: bool = False


@dataclass
class Game:
    """
    一個房間的完整遊戲狀態

    deck 只存在伺服器端，對外的 GameStateResponse 不包含它
    """
    deck: List[Card]
    dealer: Hand = field(default_factory=Hand)
    players: List[Hand] = field(
        default_factory=lambda: [Hand() for _ in range(PLAYER_COUNT)]
    )
    results: List[PlayerResult] = field(
        default_factory=lambda: [PlayerResult.PLAYING] * PLAYER_COUNT
    )
    turn: int = 0
    status: GameStatus = GameStatus.PLAYING
