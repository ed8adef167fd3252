import asyncio
from typing import Awaitable, Iterable, List, Set, Tuple

from schemas.poems import Poem

class ResultAggregator:
    """Состояние одного объединённого поиска: счётчики и уже принятые стихи."""

    def __init__(self, expected: int):
        self.expected = expected
        self.completed = 0
        self._seen: Set[Tuple[str, str]] = set()
        self._poems: List[Poem] = []

    def add(self, poems: Iterable[Poem]) -> None:
        """Принимает результат одного подзапроса. Повторы по (title, author) пропускаются."""
        for poem in poems:
            key = poem.dedup_key
            if key in self._seen:
                continue
            self._seen.add(key)
            self._poems.append(poem)
        self.completed += 1

    @property
    def is_complete(self) -> bool:
        return self.completed >= self.expected

    @property
    def poems(self) -> List[Poem]:
        return list(self._poems)


async def gather_unique(lookups: List[Awaitable[List[Poem]]]) -> List[Poem]:
    """
    Запускает подзапросы одновременно и склеивает их по мере завершения.

    Результат отдаётся только когда завершились все подзапросы.
    Первая же ошибка отменяет оставшиеся и пробрасывается наружу,
    уже собранные стихи при этом теряются.
    """
    tasks = [asyncio.ensure_future(lookup) for lookup in lookups]
    aggregator = ResultAggregator(expected=len(tasks))
    try:
        pending = asyncio.as_completed(tasks)
        while not aggregator.is_complete:
            aggregator.add(await next(pending))
    except BaseException:
        for task in tasks:
            task.cancel()
        # ждём, пока отменённые задачи действительно завершатся
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
    return aggregator.poems
