import logging

import httpx

from core.exceptions import (
    PoetryDbError,
    NetworkError,
    NotFoundError,
    ServerFaultError,
    ClientFaultError,
    UnknownPoetryError,
)

logger = logging.getLogger(__name__)

class ErrorNormalizer:
    """
    Превращает любую ошибку запроса к PoetryDB в одно понятное сообщение.

    Порядок проверки важен: сначала сеть, потом коды ответа (404, 5xx, 4xx),
    потом наши собственные ошибки, и в конце общий запасной вариант.
    Исходная ошибка только логируется, пользователю она не показывается.
    """

    def __init__(self, base_url: str):
        self.base_url = base_url

    def classify(self, operation: str, error: BaseException) -> PoetryDbError:
        if isinstance(error, httpx.TransportError):
            normalized = NetworkError(
                f"Network error: unable to reach the server at {self.base_url}", operation
            )
        elif isinstance(error, httpx.HTTPStatusError):
            normalized = self._from_status(operation, error.response)
        elif isinstance(error, PoetryDbError):
            normalized = type(error)(f"{operation}: {error.message}", operation)
        else:
            normalized = UnknownPoetryError(f"{operation} failed", operation)

        logger.error("[PoetryDB Error] %s", normalized.message, exc_info=error)
        return normalized

    def normalize(self, operation: str, error: BaseException) -> str:
        return self.classify(operation, error).message

    @staticmethod
    def _from_status(operation: str, response: httpx.Response) -> PoetryDbError:
        status = response.status_code
        if status == 404:
            return NotFoundError(
                f"{operation}: No results found. Please try a different search.", operation
            )
        if status >= 500:
            return ServerFaultError(
                f"Server error ({status}): the remote service is temporarily unavailable.",
                operation,
            )
        if status >= 400:
            return ClientFaultError(
                f"Request error ({status}): {response.reason_phrase}", operation
            )
        return UnknownPoetryError(f"{operation} failed", operation)
