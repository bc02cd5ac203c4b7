"""
Book model representing a single catalog entry.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Book(BaseModel):
    """
    Immutable catalog entry, compared by value.

    Business rules (year range, required title) are not enforced here;
    they belong to the catalog service. A stored book may legitimately
    carry year 0 when its persisted year could not be parsed.

    Attributes:
        id: Unique identifier within a repository
        title: Book title
        author: Author name
        year: Publication year
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Clean Code",
                "author": "Robert C. Martin",
                "year": 2008,
            }
        },
    )

    id: int
    title: str = ""
    author: str = ""
    year: int = 0

    def with_title(self, title: str) -> "Book":
        return self.model_copy(update={"title": title})

    def with_author(self, author: str) -> "Book":
        return self.model_copy(update={"author": author})

    def with_year(self, year: int) -> "Book":
        return self.model_copy(update={"year": year})
