"""
並發控制工具

整個 process 只有一把鎖，保護 GameRegistry 和所有 Game。
FastAPI 的 sync endpoint 跑在 threadpool，所以不同 request 之間真的會並行。

所有房間的操作都被完全序列化（不只是同一房間內）
"""
from functools import wraps
import threading

registry_lock = threading.Lock()


def serialized(func):
    """
    Lock decorator：整個函式執行期間持有 registry_lock

    使用方式：
        @serialized
        def some_game_operation(room_id: str, ...):
            game = registry.get(room_id)
            # 讀寫 game 都在鎖內

    注意：
        - registry_lock 不可重入，被裝飾的函式不能互相呼叫
        - 異常會直接往外拋，鎖會在離開時釋放
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        with registry_lock:
            return func(*args, **kwargs)

    return wrapper
