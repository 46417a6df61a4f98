"""
核心業務邏輯層

這個 package 包含所有核心業務邏輯，包括：
- 狀態機：集中管理遊戲狀態轉換
- Manager：管理每個房間遊戲的生命週期
- Registry：room_id -> Game 的記憶體儲存
- Locks：並發控制工具
"""
