"""
Example 03: Library Aggregate and Parquet Catalogs

The Library owns the books and creates cursors over them.
Catalogs round-trip through Parquet with PyArrow.
"""

import tempfile
from pathlib import Path

from library_iterator import BookCatalog, Library
from library_iterator.data_generator import BookGenerator


if __name__ == "__main__":
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "books.parquet"

        catalog = BookCatalog()
        stats = catalog.write_parquet(BookGenerator(seed=5).generate_books(40), path)
        print(f"Wrote {stats['num_rows']} books ({stats['file_size_bytes']:,} bytes)")

        library = Library(catalog.read(path))

    print(f"\nCategories: {library.count_by_category()}")

    fiction = library.fiction_iterator()
    first = fiction.advance()
    print(f"\nFirst Fiction book: {first.title}")
    print(f"Remaining Fiction books: {len(list(fiction))}")

    print("\n✅ Each iterator call returns a fresh, independent cursor!")
