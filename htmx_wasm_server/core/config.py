from pydantic_settings import BaseSettings
from functools import lru_cache
from pathlib import Path
from typing import List

class Settings(BaseSettings):
    PROJECT_NAME: str = "HTMX WASM Demo Server"
    API_PREFIX: str = "/api"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "info"
    LOG_REQUESTS: bool = False
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:3001",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:3001",
    ]

    # Static site
    SERVING_ROOT: str = "."
    INDEX_FILE: str = "index.html"
    PLAY_FILE: str = "play.html"
    WASM_DIR: str = "pkg"
    SPA_FALLBACK: bool = False  # Serve INDEX_FILE for unknown static paths

    # Realtime hub
    WS_QUEUE_SIZE: int = 100

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def serving_root(self) -> Path:
        return Path(self.SERVING_ROOT).resolve()

@lru_cache()
def get_settings():
    return Settings()

