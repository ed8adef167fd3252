from .poems import Poem, SearchRequest, SearchStatus, SearchView

__all__ = ["Poem", "SearchRequest", "SearchStatus", "SearchView"]
