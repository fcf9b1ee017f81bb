# bookshelf/models.py
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr
from pydantic.alias_generators import to_camel


class BookPayload(BaseModel):
    """Create/update request body. Unknown keys (id, finished, ...) are dropped."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: Optional[StrictStr] = None
    year: Any = None
    author: Any = None
    summary: Any = None
    publisher: Any = None
    page_count: Optional[StrictInt] = None
    read_page: Optional[StrictInt] = None
    reading: Optional[StrictBool] = False


class Book(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., description="Unique id")
    name: str
    year: Any = None
    author: Any = None
    summary: Any = None
    publisher: Any = None
    page_count: int
    read_page: int
    finished: bool  # page_count == read_page at last write
    reading: bool
    inserted_at: str
    updated_at: str

    def to_dict(self):
        """Full record keyed by its JSON (camelCase) names."""
        return self.model_dump(by_alias=True)

    def to_summary(self):
        """
        Reduce the book to the fields returned by the list endpoint.

        Returns:
            dict: {"id", "name", "publisher"} only.
        """
        return {"id": self.id, "name": self.name, "publisher": self.publisher}
