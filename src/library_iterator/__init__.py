"""Library Iterator - filtered, forward-only traversal over book lists."""

__version__ = "0.1.0"

from .catalog import BookCatalog, books_from_dataframe, books_to_dataframe
from .filtered_cursor import FilteredCursor, category_equals, fiction_cursor
from .iterator_interface import LibraryIterator
from .library import Library
from .models import Book, BookCategory, CursorState

__all__ = [
    # Models
    "Book",
    "BookCategory",
    "CursorState",
    # Iterators
    "LibraryIterator",
    "FilteredCursor",
    "category_equals",
    "fiction_cursor",
    # Aggregate
    "Library",
    # Catalog
    "BookCatalog",
    "books_to_dataframe",
    "books_from_dataframe",
]
