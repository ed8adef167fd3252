from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

class Poem(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    author: str
    lines: List[str]
    linecount: str

    @field_validator("linecount", mode="before")
    @classmethod
    def linecount_as_str(cls, value):
        # PoetryDB отдаёт строку, но числа тоже встречаются
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def dedup_key(self) -> Tuple[str, str]:
        """Ключ для дедупликации: точная пара (название, автор)."""
        return (self.title, self.author)

class SearchRequest(BaseModel):
    author: str = ""
    title: str = ""

    @field_validator("author", "title", mode="before")
    @classmethod
    def strip_value(cls, value):
        if value is None:
            return ""
        return value.strip() if isinstance(value, str) else value

    @model_validator(mode="after")
    def require_one_field(self):
        if not self.author and not self.title:
            raise ValueError("At least one search parameter is required")
        return self

class SearchStatus(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    SUCCESS = "success"
    EMPTY = "empty"
    ERROR = "error"

class SearchView(BaseModel):
    status: SearchStatus = SearchStatus.IDLE
    poems: List[Poem] = []
    message: str = ""
    is_loading: bool = False
