"""Forward-only cursor that skips books rejected by a predicate."""

import logging
from typing import Optional, Sequence, Union

from .iterator_interface import LibraryIterator
from .models import Book, BookCategory, CursorState
from .protocols import BookPredicate, Categorized, LoggerProtocol


def category_equals(target: Union[str, BookCategory]) -> BookPredicate:
    """
    Build a predicate that accepts books of a single category.

    Books without a ``category`` attribute, or with ``category=None``,
    never match.

    Args:
        target: Category to accept, as a plain string or a BookCategory

    Returns:
        Predicate usable by FilteredCursor
    """

    def predicate(book: Categorized) -> bool:
        category = getattr(book, "category", None)
        return category is not None and category == target

    predicate.__name__ = f"category_equals({str(getattr(target, 'value', target))!r})"
    return predicate


class FilteredCursor(LibraryIterator):
    """
    Filtered, single-pass traversal over an ordered list of books.

    The cursor holds a reference to the caller's list and never mutates it.
    Structural changes to the list during a traversal leave the cursor
    position meaningless; callers must not do that.

    Position only moves forward. After a scan that finds nothing, it rests
    at ``len(books)``, so ``current()`` returns None from then on.
    """

    def __init__(
        self,
        books: Optional[Sequence[Book]],
        predicate: Optional[BookPredicate] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize cursor.

        Args:
            books: Books to traverse; None is treated as an empty list
            predicate: Acceptance test, defaults to category == "Fiction"
            logger: Logger instance (defaults to module logger)
        """
        self.books: Sequence[Book] = books if books is not None else []
        self.predicate = predicate or category_equals(BookCategory.FICTION)
        self._position = 0
        self._logger = logger or logging.getLogger(__name__)

    @property
    def position(self) -> int:
        """Index of the next unscanned book."""
        return self._position

    @property
    def state(self) -> CursorState:
        """ACTIVE while the position is inside the list, EXHAUSTED after."""
        if self._position < len(self.books):
            return CursorState.ACTIVE
        return CursorState.EXHAUSTED

    def advance(self) -> Optional[Book]:
        """
        Return the next accepted book and move past it.

        Rejected books are skipped. If nothing is accepted before the end,
        the position is left at the end of the list and None is returned.

        Returns:
            Next accepted book, or None
        """
        while self._position < len(self.books):
            book = self.books[self._position]
            self._position += 1
            if self.predicate(book):
                self._logger.debug(f"Matched book at index {self._position - 1}")
                return book

        self._logger.debug(f"No more matching books after {len(self.books)} scanned")
        return None

    def is_exhausted(self) -> bool:
        """Return True if no accepted book remains from the current position."""
        for index in range(self._position, len(self.books)):
            if self.predicate(self.books[index]):
                return False
        return True

    def current(self) -> Optional[Book]:
        """Return the book under the cursor without filtering, or None past the end."""
        if self._position < len(self.books):
            return self.books[self._position]
        return None

    def __iter__(self) -> "FilteredCursor":
        """Return self as iterator."""
        return self

    def __next__(self) -> Book:
        """Get next accepted book, raising StopIteration once exhausted."""
        book = self.advance()
        if book is None:
            raise StopIteration
        return book

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(position={self._position}, "
            f"length={len(self.books)}, state={self.state.value})"
        )


def fiction_cursor(
    books: Optional[Sequence[Book]], logger: Optional[LoggerProtocol] = None
) -> FilteredCursor:
    """Create a cursor that only returns Fiction books."""
    return FilteredCursor(books, category_equals(BookCategory.FICTION), logger=logger)
