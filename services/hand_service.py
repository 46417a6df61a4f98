"""
手牌計分服務

A 先算 11，超過 21 時逐張降為 1；J/Q/K 算 10；其他照牌面
"""
from typing import Tuple

from models import Card, Hand, BLACKJACK, DEALER_STAND_VALUE


def card_value(card: Card) -> int:
    if card.rank == "A":
        return 11
    if card.rank in ("J", "Q", "K"):
        return 10
    return int(card.rank)


def hand_value(hand: Hand) -> Tuple[int, bool]:
    """
    計算手牌的最佳點數

    返回：
        (total, soft)

    注意：
        soft 的意思和一般 Blackjack 術語相反：
        True 表示「至少有一張 A 從 11 被降為 1」，
        而不是「還有一張 A 算 11」。保留這個行為，不要改名。

    範例：
        [A, K]       -> (21, False)
        [A, A]       -> (12, True)
        [A, A, A, A] -> (14, True)
    """
    total = 0
    aces = 0
    for card in hand.cards:
        total += card_value(card)
        if card.rank == "A":
            aces += 1

    soft = False
    while total > BLACKJACK and aces > 0:
        total -= 10
        aces -= 1
        soft = True

    return total, soft


def is_busted(hand: Hand) -> bool:
    total, _ = hand_value(hand)
    return total > BLACKJACK


def dealer_should_hit(hand: Hand) -> bool:
    # Dealer 在 17 點停牌，soft 17 不特別處理
    total, _ = hand_value(hand)
    return total < DEALER_STAND_VALUE
