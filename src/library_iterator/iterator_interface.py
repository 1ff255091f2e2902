"""Abstract interface for library iterators."""

from abc import ABC, abstractmethod
from typing import Optional

from .models import Book


class LibraryIterator(ABC):
    """Abstract base class for forward-only traversals over a book list."""

    @abstractmethod
    def advance(self) -> Optional[Book]:
        """Move to the next accepted book and return it.

        Returns:
            The next accepted book, or None once the traversal is over
        """
        pass

    @abstractmethod
    def is_exhausted(self) -> bool:
        """Report whether any accepted book remains.

        Returns:
            True if no accepted book remains from the current position
        """
        pass

    @abstractmethod
    def current(self) -> Optional[Book]:
        """Return the book at the current position, accepted or not.

        Returns:
            The book under the cursor, or None past the end of the list
        """
        pass
