"""Library aggregate that hands out filtered cursors over its books."""

import logging
from collections import Counter
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .filtered_cursor import FilteredCursor, category_equals, fiction_cursor
from .models import Book, BookCategory
from .protocols import BookPredicate, LoggerProtocol

UNCATEGORIZED = "Uncategorized"


class Library:
    """
    Collection of books.

    Single Responsibility: Own the book list and create cursors over it.
    Every cursor is independent and reads the library's own list, so books
    must not be added while a traversal is still in use.
    """

    def __init__(
        self,
        books: Optional[Iterable[Book]] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize library.

        Args:
            books: Initial books, copied into the library
            logger: Logger instance
        """
        self._books: List[Book] = list(books) if books is not None else []
        self._logger = logger or logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self._books)

    @property
    def books(self) -> Tuple[Book, ...]:
        """Snapshot of the books currently in the library."""
        return tuple(self._books)

    def add_book(self, book: Book) -> None:
        """Append a single book."""
        self._books.append(book)

    def add_books(self, books: Iterable[Book]) -> None:
        """Append several books, keeping their order."""
        before = len(self._books)
        self._books.extend(books)
        self._logger.info(f"Added {len(self._books) - before:,} books to library")

    def iterator(self, predicate: BookPredicate) -> FilteredCursor:
        """Create a cursor accepting books that satisfy ``predicate``."""
        return FilteredCursor(self._books, predicate, logger=self._logger)

    def category_iterator(self, category: Union[str, BookCategory]) -> FilteredCursor:
        """Create a cursor over the books of one category."""
        return self.iterator(category_equals(category))

    def fiction_iterator(self) -> FilteredCursor:
        """Create a cursor over the Fiction books."""
        return fiction_cursor(self._books, logger=self._logger)

    def count_by_category(self) -> Dict[str, int]:
        """
        Count books per category.

        Returns:
            Mapping of category to number of books; books without a
            category are counted under "Uncategorized"
        """
        counts = Counter(
            str(getattr(book.category, "value", book.category))
            if book.category is not None
            else UNCATEGORIZED
            for book in self._books
        )
        return dict(counts)
