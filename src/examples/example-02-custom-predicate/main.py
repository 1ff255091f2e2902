"""
Example 02: Injecting a Predicate

The filter is not hard-coded: pass any Book -> bool function.
A cursor is also a Python iterator, so for loops and list() work.
"""

from library_iterator import BookCategory, FilteredCursor, category_equals
from library_iterator.data_generator import BookGenerator


if __name__ == "__main__":
    books = BookGenerator(seed=1).generate_books(15)

    print("Science books:")
    for book in FilteredCursor(books, category_equals(BookCategory.SCIENCE)):
        print(f"  {book.title} ({book.published_year})")

    print("\nBooks published before 1980:")
    old = FilteredCursor(books, lambda b: b.published_year is not None and b.published_year < 1980)
    for book in old:
        print(f"  {book.title} ({book.published_year})")

    print("\n✅ Same cursor, different filters!")
