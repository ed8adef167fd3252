import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from core.config import settings
from core.exceptions import InvalidArgumentError, MalformedPayloadError
from schemas.poems import Poem
from services.aggregator import gather_unique
from services.error_normalizer import ErrorNormalizer

logger = logging.getLogger(__name__)

AUTHOR_SEARCH = "Author search"
TITLE_SEARCH = "Title search"
RANDOM_POEM = "Random poem retrieval"


def encode_segment(value: str) -> str:
    """Кодирует кусок пути так же, как encodeURIComponent в браузере."""
    return quote(value, safe="!*'()")


def normalize_payload(payload: Any) -> List[Dict[str, Any]]:
    """
    Приводит ответ PoetryDB к списку записей о стихах.

    Варианты ответа:
      - список стихов: берём как есть;
      - объект с полем "poems" (список): берём это поле;
      - любая другая форма: пустой список, а не ошибка.

    Последнее правило намеренное: PoetryDB на пустой поиск отвечает
    {"status": 404, "reason": "Not found"} с кодом 200, и это "ничего не найдено".
    Пустой ответ (null) при этом считается испорченным.
    """
    if payload is None or (not payload and not isinstance(payload, (list, dict))):
        raise MalformedPayloadError("Invalid response from server")
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("poems"), list):
        return payload["poems"]
    return []


def parse_poems(entries: List[Dict[str, Any]]) -> List[Poem]:
    try:
        return [Poem.model_validate(entry) for entry in entries]
    except ValidationError as e:
        raise MalformedPayloadError("Invalid poem entry in response") from e


class PoetryDbClient:
    """Асинхронный клиент PoetryDB: поиск по автору, по названию и случайный стих."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.POETRYDB_BASE_URL).rstrip("/")
        self.errors = ErrorNormalizer(self.base_url)
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.POETRYDB_TIMEOUT,
            transport=transport,
            follow_redirects=True,
        )

    async def __aenter__(self) -> "PoetryDbClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _get_json(self, path: str) -> Any:
        response = await self._http.get(path)
        response.raise_for_status()
        return response.json()

    async def _lookup(self, operation: str, path: str) -> List[Poem]:
        try:
            payload = await self._get_json(path)
            return parse_poems(normalize_payload(payload))
        except Exception as e:
            raise self.errors.classify(operation, e) from e

    async def search_by_author(self, author: str) -> List[Poem]:
        author = (author or "").strip()
        if not author:
            raise InvalidArgumentError("Author name cannot be empty", AUTHOR_SEARCH)
        return await self._lookup(AUTHOR_SEARCH, f"/author/{encode_segment(author)}")

    async def search_by_title(self, title: str) -> List[Poem]:
        title = (title or "").strip()
        if not title:
            raise InvalidArgumentError("Title cannot be empty", TITLE_SEARCH)
        return await self._lookup(TITLE_SEARCH, f"/title/{encode_segment(title)}")

    async def search_by_author_and_title(self, author: str = "", title: str = "") -> List[Poem]:
        """
        Ищет по автору и/или названию. Непустые поля дают по одному подзапросу,
        подзапросы идут одновременно, результат без повторов.
        """
        author = (author or "").strip()
        title = (title or "").strip()
        if not author and not title:
            raise InvalidArgumentError("At least one search parameter is required")

        lookups = []
        if author:
            lookups.append(self.search_by_author(author))
        if title:
            lookups.append(self.search_by_title(title))

        logger.info("PoetryDB search: author=%r title=%r (%d lookups)", author, title, len(lookups))
        poems = await gather_unique(lookups)
        logger.info("PoetryDB search finished with %d poems", len(poems))
        return poems

    async def get_random_poem(self) -> Poem:
        try:
            payload = await self._get_json("/random")
            if isinstance(payload, list) and payload:
                return parse_poems(payload[:1])[0]
            raise MalformedPayloadError("Invalid response format")
        except Exception as e:
            raise self.errors.classify(RANDOM_POEM, e) from e
