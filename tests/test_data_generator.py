"""Tests for data_generator module."""

import pytest

from library_iterator.data_generator import BookGenerator
from library_iterator.filtered_cursor import FilteredCursor, category_equals, fiction_cursor
from library_iterator.models import Book, BookCategory


def test_book_generator_initialization():
    """Test that BookGenerator can be initialized."""
    generator = BookGenerator(seed=42)
    assert generator is not None
    assert generator.faker is not None
    assert generator.categories == [c.value for c in BookCategory]


def test_generate_books():
    """Test generating books."""
    generator = BookGenerator(seed=42)

    books = generator.generate_books(100)

    assert len(books) == 100
    assert all(isinstance(book, Book) for book in books)
    assert all(book.category in generator.categories for book in books)
    assert all(isinstance(book.title, str) and book.title for book in books)


def test_generate_zero_books():
    """Test that zero books gives an empty catalog."""
    assert BookGenerator().generate_books(0) == []


def test_negative_count_rejected():
    """Test that a negative count raises ValueError."""
    with pytest.raises(ValueError, match="must not be negative"):
        BookGenerator().generate_books(-1)


def test_iter_books_is_lazy():
    """Test that iter_books() yields books one at a time."""
    books = BookGenerator().iter_books(3)

    assert isinstance(next(books), Book)
    assert len(list(books)) == 2


def test_restricted_categories():
    """Test drawing from a custom set of categories."""
    generator = BookGenerator(seed=7, categories=["Fiction"])
    books = generator.generate_books(25)

    assert len(list(fiction_cursor(books))) == 25
    assert list(generator.iter_books(0)) == []


def test_same_seed_same_books():
    """Test that the same seed produces the same catalog."""
    first = BookGenerator(seed=42).generate_books(10)
    second = BookGenerator(seed=42).generate_books(10)

    assert first == second


def test_cursor_counts_generated_category():
    """Test that the cursor finds every generated book of a category."""
    books = BookGenerator(seed=3).generate_books(200)

    for category in BookCategory:
        expected = sum(1 for b in books if b.category == category.value)
        assert len(list(FilteredCursor(books, category_equals(category)))) == expected

    assert len(list(fiction_cursor(books))) == sum(1 for b in books if b.category == "Fiction")


def test_generate_dataframe():
    """Test generating a DataFrame of books."""
    df = BookGenerator(seed=42).generate_dataframe(50)

    assert len(df) == 50
    assert list(df.columns) == ["title", "author", "category", "isbn", "published_year"]
