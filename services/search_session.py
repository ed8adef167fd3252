import logging
from typing import List

from pydantic import ValidationError

from core.exceptions import PoetryDbError
from schemas.poems import Poem, SearchRequest, SearchStatus, SearchView
from services.poetry_client import PoetryDbClient

logger = logging.getLogger(__name__)

EMPTY_FORM_MESSAGE = "Please enter an author name or poem title"
NO_RESULTS_HINT = "No poems found. Try different search terms."

class SearchSession:
    """
    Состояние страницы поиска: Idle -> Searching -> Success / Empty / Error.

    Запросы не отменяются: если запущено несколько действий подряд,
    на экране остаётся результат того, которое завершилось последним.
    """

    def __init__(self, client: PoetryDbClient):
        self.client = client
        self.reset()

    def reset(self) -> None:
        self.status = SearchStatus.IDLE
        self.poems: List[Poem] = []
        self.message = ""
        self.is_loading = False

    def view(self) -> SearchView:
        return SearchView(
            status=self.status,
            poems=self.poems,
            message=self.message,
            is_loading=self.is_loading,
        )

    def _start(self) -> None:
        self.status = SearchStatus.SEARCHING
        self.poems = []
        self.message = ""
        self.is_loading = True

    def _show(self, poems: List[Poem]) -> None:
        self.poems = poems
        self.is_loading = False
        if poems:
            self.status = SearchStatus.SUCCESS
            self.message = ""
        else:
            self.status = SearchStatus.EMPTY
            self.message = NO_RESULTS_HINT

    def _fail(self, message: str) -> None:
        self.status = SearchStatus.ERROR
        self.poems = []
        self.message = message
        self.is_loading = False

    async def search(self, author: str = "", title: str = "") -> SearchView:
        try:
            request = SearchRequest(author=author, title=title)
        except ValidationError:
            self._fail(EMPTY_FORM_MESSAGE)
            return self.view()

        self._start()
        try:
            poems = await self.client.search_by_author_and_title(request.author, request.title)
        except PoetryDbError as e:
            logger.warning("Search error: %s", e.message)
            self._fail(e.message)
        else:
            self._show(poems)
        return self.view()

    async def random(self) -> SearchView:
        self._start()
        try:
            poem = await self.client.get_random_poem()
        except PoetryDbError as e:
            logger.warning("Random poem error: %s", e.message)
            self._fail(e.message)
        else:
            self._show([poem])
        return self.view()
