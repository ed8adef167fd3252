# core/__init__.py
from .config import settings
from .logging import setup_logging

__all__ = ["settings", "setup_logging"]
