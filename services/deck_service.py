"""
牌組服務：產生洗好的 52 張牌、發牌

純計算邏輯，不涉及狀態轉換
"""
import logging
import random
import time
from typing import List, Optional

from models import Card, Game, Hand, SUITS, RANKS

logger = logging.getLogger(__name__)


def new_deck(rng: Optional[random.Random] = None) -> List[Card]:
    """
    產生一副洗好的牌（4 花色 × 13 點數 = 52 張）

    參數：
        rng: 亂數產生器（測試時傳入固定 seed）；
             預設每次用 time.time_ns() 重新 seed

    返回：
        52 張不重複的 Card

    注意：
        - 以時間作為 seed，連續快速呼叫可能得到相同順序
        - 不是密碼學安全的洗牌，只適合休閒遊戲
    """
    if rng is None:
        rng = random.Random(time.time_ns())

    deck = [Card(suit=suit, rank=rank) for suit in SUITS for rank in RANKS]
    rng.shuffle(deck)
    return deck


def deal_card(game: Game, hand: Hand) -> Card:
    """
    從 game.deck 最上面發一張牌到 hand

    牌用完時直接換一副全新的 52 張牌（無限牌靴）。
    這會產生和場上重複的牌。

    參數：
        game: 遊戲狀態（會修改 deck）
        hand: 接收這張牌的手牌

    返回：
        發出的 Card
    """
    if not game.deck:
        logger.warning("Deck exhausted, regenerating a full 52-card deck")
        game.deck = new_deck()

    card = game.deck.pop(0)
    hand.cards.append(card)
    return card
