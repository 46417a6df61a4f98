"""
Game API Endpoints

職責：
1. 開始 / 重新開始房間的遊戲
2. 查詢遊戲狀態
3. 玩家動作（hit / stand）

所有業務邏輯集中在 GameManager，這裡只負責把異常轉成 HTTP status

路徑規則：/game/<op>/<room_id>[/...]
- room_id 取 op 後的第一段，之後的路徑忽略（/game/start/a/b -> 房間 a）
- room_id 為空（/game/start/）-> 400 Missing gameroomid
"""
from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import ValidationError
import logging

from schemas import ActionSubmit, GameStateResponse
from core.game_manager import GameManager
from core.exceptions import (
    MissingRoomId,
    MalformedRequestBody,
    GameNotFound,
    InvalidGameState,
    InvalidPlayerIndex,
    PlayerAlreadyDone,
    UnknownAction
)

router = APIRouter(prefix="/game", tags=["game"])
logger = logging.getLogger(__name__)


def room_id_from_path(room_path: str) -> str:
    """
    從路徑取出 room id（第一段）

    異常：
        HTTPException(400): room id 是空的
    """
    room_id = room_path.split("/", 1)[0]
    if not room_id:
        raise HTTPException(status_code=400, detail=str(MissingRoomId()))
    return room_id


async def parse_action_body(request: Request) -> ActionSubmit:
    """
    讀取動作 body，不看 Content-Type（curl -d 送的 form content-type 也接受）

    異常：
        HTTPException(400): 不是合法 JSON 或欄位型別錯誤
    """
    body = await request.body()
    try:
        return ActionSubmit.model_validate_json(body)
    except ValidationError as e:
        logger.warning(f"Malformed request body for {request.url.path}: {e.errors()}")
        raise HTTPException(status_code=400, detail=str(MalformedRequestBody()))


@router.post("/start/{room_path:path}", response_model=GameStateResponse)
def start_game(room_id: str = Depends(room_id_from_path)):
    """
    開始遊戲（同一房間已有遊戲則直接取代）

    返回：
        完整遊戲狀態（不含 deck）
    """
    try:
        return GameManager.start_game(room_id)

    except MissingRoomId as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to start game: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("/state/{room_path:path}", response_model=GameStateResponse)
def get_game_state(room_id: str = Depends(room_id_from_path)):
    """
    取得遊戲狀態（唯讀，沒有副作用）
    """
    try:
        return GameManager.get_state(room_id)

    except GameNotFound:
        raise HTTPException(status_code=404, detail="Game not found")
    except Exception as e:
        logger.error(f"Failed to get game state: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.post("/action/{room_path:path}", response_model=GameStateResponse)
def submit_action(
    room_id: str = Depends(room_id_from_path),
    action_data: ActionSubmit = Depends(parse_action_body)
):
    """
    提交玩家動作

    Body：
        {"player": 0-2, "action": "hit" | "stand"}
        缺少的欄位取零值：player=0、action=""（-> Unknown action）

    返回：
        更新後的遊戲狀態；最後一位玩家結束時已包含 Dealer 的牌和結算結果

    錯誤（全部 400）：
        Body 格式錯誤、遊戲不存在或不在 playing、玩家編號錯誤、玩家已結束、未知動作
    """
    try:
        return GameManager.submit_action(
            room_id,
            action_data.player,
            action_data.action
        )

    except (
        GameNotFound,
        InvalidGameState,
        InvalidPlayerIndex,
        PlayerAlreadyDone,
        UnknownAction
    ) as e:
        logger.warning(f"Rejected action for room {room_id}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to submit action: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")
