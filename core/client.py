from core.config import settings
from services.poetry_client import PoetryDbClient

poetry_client = PoetryDbClient(settings.POETRYDB_BASE_URL, timeout=settings.POETRYDB_TIMEOUT)

def get_client() -> PoetryDbClient:
    """Возвращает общий экземпляр клиента PoetryDB."""
    return poetry_client
