"""
自定義異常類別

集中管理所有業務邏輯異常，方便 API 層統一處理
"""


class BlackjackException(Exception):
    """所有遊戲異常的基類"""
    pass


# ============ Room 相關異常 ============

class MissingRoomId(BlackjackException):
    """URL 沒有帶 room id"""
    def __init__(self):
        super().__init__("Missing gameroomid")


class GameNotFound(BlackjackException):
    """房間內沒有遊戲（從未呼叫過 start）"""
    def __init__(self, room_id):
        self.room_id = room_id
        super().__init__(f"Game {room_id} not found")


# ============ 狀態相關異常 ============

class InvalidGameState(BlackjackException):
    """遊戲不在 playing 狀態（已經結束）"""
    def __init__(self, room_id):
        self.room_id = room_id
        super().__init__(f"Game {room_id} is not in playing state")


class InvalidStateTransition(BlackjackException):
    """非法的狀態轉換"""
    pass


# ============ Action 相關異常 ============

class MalformedRequestBody(BlackjackException):
    """Request body 不是合法的 {"player": int, "action": str}"""
    def __init__(self):
        super().__init__("Invalid input")


class InvalidPlayerIndex(BlackjackException):
    """玩家編號不在 0-2 之間"""
    def __init__(self, player):
        self.player = player
        super().__init__(f"Invalid player {player}")


class PlayerAlreadyDone(BlackjackException):
    """玩家已經 Stand 或 Bust"""
    def __init__(self, player):
        self.player = player
        super().__init__(f"Player {player} already finished")


class UnknownAction(BlackjackException):
    """動作不是 hit 或 stand"""
    def __init__(self, action):
        self.action = action
        super().__init__(f"Unknown action {action}")
