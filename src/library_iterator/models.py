"""Data models for books and cursor state."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class BookCategory(str, Enum):
    """Book category enumeration."""

    FICTION = "Fiction"
    NON_FICTION = "NonFiction"
    BIOGRAPHY = "Biography"
    SCIENCE = "Science"
    HISTORY = "History"


class CursorState(str, Enum):
    """Logical state of a filtered cursor."""

    ACTIVE = "active"
    EXHAUSTED = "exhausted"


@dataclass
class Book:
    """Book record.

    Only ``category`` is read by cursors; every other field is carried
    along for catalogs and reporting.
    """

    title: str
    author: str
    category: Optional[str]
    isbn: str = ""
    published_year: Optional[int] = None

    def to_dict(self) -> Dict:
        """Convert book to dictionary."""
        return {
            "title": self.title,
            "author": self.author,
            "category": self.category,
            "isbn": self.isbn,
            "published_year": self.published_year,
        }
