from __future__ import annotations
from typing import Any, Dict, List, Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === API ===
    PROJECT_NAME: str = "BlogExpress API"
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = ["*"]
    RECENT_POSTS_DEFAULT: int = 5

    # === Database ===
    # DATABASE_URL wins when set (sqlite for local runs and tests)
    DATABASE_URL: Optional[str] = None
    DB_USER: str = "blogexpress"
    DB_PASSWORD: str = ""
    DB_HOST: str = "database"
    DB_INTERNAL_PORT: int = 3306
    MANAGER_DB_NAME: str = "blogexpress"

    # === Engine / pool ===
    DB_ECHO: bool = False
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_RECYCLE_SEC: int = 1800
    DB_POOL_PRE_PING: bool = True
    DB_POOL_TIMEOUT_SEC: int = 30

    # === Broadcast ===
    BROADCAST_ENABLED: bool = True
    BROADCAST_HISTORY_SIZE: int = 100

    LOG_LEVEL: str = "INFO"

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        user = quote_plus(self.DB_USER)
        pwd = quote_plus(self.DB_PASSWORD)
        return (
            f"mysql+pymysql://{user}:{pwd}@{self.DB_HOST}:{self.DB_INTERNAL_PORT}/{self.MANAGER_DB_NAME}"
            f"?charset=utf8mb4"
        )

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    def engine_kwargs(self) -> Dict[str, Any]:
        if self.is_sqlite:
            # sqlite has no server-side pool to size
            return {
                "echo": self.DB_ECHO,
                "connect_args": {"check_same_thread": False},
                "future": True,
            }
        return {
            "echo": self.DB_ECHO,
            "pool_pre_ping": self.DB_POOL_PRE_PING,
            "pool_size": self.DB_POOL_SIZE,
            "max_overflow": self.DB_MAX_OVERFLOW,
            "pool_recycle": self.DB_POOL_RECYCLE_SEC,
            "pool_timeout": self.DB_POOL_TIMEOUT_SEC,
            "future": True,
        }


settings = Settings()
