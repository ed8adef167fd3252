from typing import Optional


class PoetryDbError(Exception):
    """Базовая ошибка клиента PoetryDB. message уже готово для показа пользователю."""

    status_code = 500

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation


class InvalidArgumentError(PoetryDbError):
    status_code = 422


class NetworkError(PoetryDbError):
    status_code = 502


class NotFoundError(PoetryDbError):
    status_code = 404


class ServerFaultError(PoetryDbError):
    status_code = 502


class ClientFaultError(PoetryDbError):
    status_code = 400


class MalformedPayloadError(PoetryDbError):
    status_code = 502


class UnknownPoetryError(PoetryDbError):
    pass
