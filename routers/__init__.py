from .poems import router as poems_router

__all__ = ["poems_router"]
