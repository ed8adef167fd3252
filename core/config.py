import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    # PoetryDB
    POETRYDB_BASE_URL = os.getenv("POETRYDB_BASE_URL", "https://poetrydb.org").rstrip("/")
    POETRYDB_TIMEOUT = float(os.getenv("POETRYDB_TIMEOUT", "5.0"))  # секунды, как у httpx по умолчанию

    # Приложение
    APP_TITLE = os.getenv("APP_TITLE", "Poetry Explorer")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

settings = Settings()
