import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    PORT: int = int(os.environ.get("PORT", 8080))
    MAX_TEXT_LEN: int = int(os.environ.get("MAX_TEXT_LEN", 128))
    MAX_OPTIONS: int = int(os.environ.get("MAX_OPTIONS", 200))
    CACHE_TTL_SECONDS: int = int(os.environ.get("CACHE_TTL_SECONDS", 600))
    CACHE_MAX_SIZE: int = int(os.environ.get("CACHE_MAX_SIZE", 5000))
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()


settings = Settings()
