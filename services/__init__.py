"""
服務層

這個 package 包含純計算邏輯，不負責狀態轉換：
- DeckService：洗牌、發牌
- HandService：手牌計分、爆牌判斷、Dealer 要牌規則
- ResultService：結算邏輯
"""
