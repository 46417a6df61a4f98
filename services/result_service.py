"""
結算服務：Dealer 完成後計算每位玩家的結果

純計算邏輯，不改變 Game.status（由 GameStateMachine 負責）
"""
from typing import List

from models import Game, Hand, PlayerResult, BLACKJACK
from services.hand_service import hand_value


def calculate_result(player: Hand, dealer_total: int) -> PlayerResult:
    """
    計算單一玩家對 Dealer 的結果

    規則（依序判斷）：
    - 玩家 busted -> Bust
    - Dealer 爆牌或玩家點數較大 -> Win
    - 玩家點數較小 -> Lose
    - 其他 -> Push

    注意：
        只看 hit 時設定的 busted 旗標，不重新檢查點數是否超過 21。
        沒有 hit 過的玩家不可能 bust。
    """
    if player.busted:
        return PlayerResult.BUST

    player_total, _ = hand_value(player)
    if dealer_total > BLACKJACK or player_total > dealer_total:
        return PlayerResult.WIN
    elif player_total < dealer_total:
        return PlayerResult.LOSE
    else:
        return PlayerResult.PUSH


def calculate_results(game: Game) -> List[PlayerResult]:
    """
    計算所有玩家的結果並寫回 game.results

    返回：
        更新後的 results 列表
    """
    dealer_total, _ = hand_value(game.dealer)
    game.results = [calculate_result(p, dealer_total) for p in game.players]
    return game.results
