"""
Room Registry：room_id -> Game 的記憶體儲存

- Process 啟動時是空的，沒有 teardown，也沒有過期清除
- 本身不加鎖，呼叫者必須持有 core.locks.registry_lock
"""
from typing import Dict, Optional

from models import Game


class GameRegistry:
    """Process 內所有房間的遊戲狀態"""

    def __init__(self):
        self._games: Dict[str, Game] = {}

    def get(self, room_id: str) -> Optional[Game]:
        return self._games.get(room_id)

    def put(self, room_id: str, game: Game) -> None:
        # 同一個 room_id 的舊遊戲直接丟棄
        self._games[room_id] = game

    def clear(self) -> None:
        self._games.clear()

    def __contains__(self, room_id: str) -> bool:
        return room_id in self._games

    def __len__(self) -> int:
        return len(self._games)


registry = GameRegistry()
