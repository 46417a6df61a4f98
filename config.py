from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List
import logging


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    class Config:
        env_file = ".env"
        env_prefix = "BLACKJACK_"


@lru_cache()
def get_settings():
    return Settings()


def setup_logging(level: str) -> None:
    """
    設定 root logger（在 main.py 啟動時呼叫一次）

    未知的 level 名稱會退回 INFO
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
