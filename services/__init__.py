from .poetry_client import PoetryDbClient
from .search_session import SearchSession
from .error_normalizer import ErrorNormalizer

__all__ = ["PoetryDbClient", "SearchSession", "ErrorNormalizer"]
