import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from core.client import poetry_client
from core.config import settings
from core.logging import setup_logging
from routers import poems_router

# --- 0. ЛОГИРОВАНИЕ ---
setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# --- 1. ЖИЗНЕННЫЙ ЦИКЛ: закрываем HTTP-клиент PoetryDB при остановке ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("PoetryDB base URL: %s", settings.POETRYDB_BASE_URL)
    yield
    await poetry_client.aclose()

# --- 2. ПРИЛОЖЕНИЕ ---
app = FastAPI(title=settings.APP_TITLE, lifespan=lifespan)
app.include_router(poems_router)

@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    logger.info("Запуск FastAPI приложения...")
    import uvicorn
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
