"""
Example 01: The Fiction Cursor

A cursor walks a list of books and stops only on Fiction titles.
advance() returns None once nothing is left, and current() shows
whatever sits under the cursor, matching or not.
"""

from library_iterator import Book, FilteredCursor


if __name__ == "__main__":
    books = [
        Book(title="B1", author="Anon", category="Fiction"),
        Book(title="B2", author="Anon", category="NonFiction"),
        Book(title="B3", author="Anon", category="Fiction"),
    ]

    cursor = FilteredCursor(books)
    print(f"current() before advancing: {cursor.current().title}")

    while not cursor.is_exhausted():
        book = cursor.advance()
        print(f"  advance() -> {book.title}   {cursor!r}")

    print(f"advance() after the end: {cursor.advance()}")
    print(f"current() after the end: {cursor.current()}")

    print("\n✅ Only Fiction books were returned, in their original order!")
