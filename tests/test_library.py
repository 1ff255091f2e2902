"""Tests for library module."""

from library_iterator.library import Library
from library_iterator.models import Book, BookCategory


def make_library():
    return Library(
        [
            Book(title="Dune", author="Frank Herbert", category="Fiction"),
            Book(title="Cosmos", author="Carl Sagan", category="Science"),
            Book(title="Emma", author="Jane Austen", category=BookCategory.FICTION),
            Book(title="Untitled", author="Unknown", category=None),
        ]
    )


def test_library_initialization():
    """Test that a Library can be initialized empty or with books."""
    assert len(Library()) == 0
    assert len(make_library()) == 4


def test_books_is_a_snapshot():
    """Test that the books property does not expose the internal list."""
    library = make_library()
    books = library.books

    library.add_book(Book(title="New", author="A", category="Fiction"))

    assert isinstance(books, tuple)
    assert len(books) == 4
    assert len(library.books) == 5


def test_fiction_iterator():
    """Test that fiction_iterator() returns only Fiction books."""
    library = make_library()

    assert [b.title for b in library.fiction_iterator()] == ["Dune", "Emma"]


def test_category_iterator():
    """Test filtering by another category."""
    library = make_library()

    assert [b.title for b in library.category_iterator("Science")] == ["Cosmos"]
    assert list(library.category_iterator("History")) == []


def test_custom_iterator():
    """Test iterating with an arbitrary predicate."""
    library = make_library()
    cursor = library.iterator(lambda b: b.author.startswith("J"))

    assert [b.title for b in cursor] == ["Emma"]


def test_iterators_are_independent():
    """Test that each call returns a fresh cursor."""
    library = make_library()
    first = library.fiction_iterator()
    second = library.fiction_iterator()

    assert first is not second
    assert first.advance().title == "Dune"
    assert second.advance().title == "Dune"


def test_add_books_keeps_order():
    """Test that add_books() appends in order."""
    library = Library()
    library.add_books(
        [
            Book(title="A", author="X", category="Fiction"),
            Book(title="B", author="Y", category="Fiction"),
        ]
    )

    assert [b.title for b in library.fiction_iterator()] == ["A", "B"]


def test_count_by_category():
    """Test category counts, including uncategorized books."""
    counts = make_library().count_by_category()

    assert counts == {"Fiction": 2, "Science": 1, "Uncategorized": 1}
