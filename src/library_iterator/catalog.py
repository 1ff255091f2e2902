"""Read and write book catalogs as Parquet or CSV files."""

import logging
import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from .models import Book
from .protocols import LoggerProtocol

COLUMNS = ["title", "author", "category", "isbn", "published_year"]

CATALOG_SCHEMA = pa.schema(
    [
        ("title", pa.string()),
        ("author", pa.string()),
        ("category", pa.string()),
        ("isbn", pa.string()),
        ("published_year", pa.int32()),
    ]
)

PathLike = Union[str, Path]


def _row(book: Book) -> Dict:
    row = book.to_dict()
    # BookCategory members are stored by value
    if row["category"] is not None:
        row["category"] = str(getattr(row["category"], "value", row["category"]))
    return row


def _optional(value):
    return None if pd.isna(value) else value


def books_to_dataframe(books: Iterable[Book]) -> pd.DataFrame:
    """
    Convert books to a DataFrame.

    Args:
        books: Books to convert

    Returns:
        DataFrame with one row per book and the catalog columns
    """
    df = pd.DataFrame([_row(book) for book in books], columns=COLUMNS)
    df["published_year"] = df["published_year"].astype("Int64")
    return df


def books_from_dataframe(df: pd.DataFrame) -> List[Book]:
    """
    Convert a DataFrame back into books.

    Missing categories and years become None, missing ISBNs become "".

    Args:
        df: DataFrame with at least title, author and category columns

    Returns:
        Books in row order

    Raises:
        ValueError: If a required column is missing
    """
    missing = [column for column in ("title", "author", "category") if column not in df.columns]
    if missing:
        raise ValueError(f"Catalog is missing required columns: {missing}")

    books = []
    for record in df.to_dict(orient="records"):
        year = _optional(record.get("published_year"))
        books.append(
            Book(
                title=str(record["title"]),
                author=str(record["author"]),
                category=_optional(record["category"]),
                isbn=_optional(record.get("isbn")) or "",
                published_year=int(year) if year is not None else None,
            )
        )
    return books


class BookCatalog:
    """
    Persists book lists to disk.

    Single Responsibility: Handle catalog file reading and writing.
    """

    def __init__(self, logger: Optional[LoggerProtocol] = None):
        """
        Initialize catalog.

        Args:
            logger: Logger instance
        """
        self._logger = logger or logging.getLogger(__name__)

    def write_parquet(
        self, books: Iterable[Book], path: PathLike, compression: str = "snappy"
    ) -> dict:
        """
        Write books to a Parquet file.

        Args:
            books: Books to write
            path: Output file path
            compression: Compression codec to use (snappy, gzip, zstd, etc.)

        Returns:
            Dictionary with write statistics
        """
        Path(path).parent.mkdir(parents=True, exist_ok=True)

        table = pa.Table.from_pylist([_row(book) for book in books], schema=CATALOG_SCHEMA)
        pq.write_table(table, str(path), compression=compression)

        stats = {
            "num_rows": table.num_rows,
            "num_columns": table.num_columns,
            "file_size_bytes": os.path.getsize(path),
            "file_path": str(path),
            "compression": compression,
        }
        self._logger.info(
            f"Wrote {stats['num_rows']:,} books to {path} ({stats['file_size_bytes']:,} bytes)"
        )
        return stats

    def read_parquet(self, path: PathLike) -> List[Book]:
        """Read books from a Parquet file."""
        if not Path(path).exists():
            raise FileNotFoundError(f"Catalog not found: {path}")

        df = pq.read_table(str(path)).to_pandas()
        books = books_from_dataframe(df)
        self._logger.info(f"Read {len(books):,} books from {path}")
        return books

    def write_csv(self, books: Iterable[Book], path: PathLike) -> dict:
        """
        Write books to a CSV file.

        A None category is written as an empty field.

        Args:
            books: Books to write
            path: Output file path

        Returns:
            Dictionary with write statistics
        """
        Path(path).parent.mkdir(parents=True, exist_ok=True)

        df = books_to_dataframe(books)
        df.to_csv(path, index=False, encoding="utf-8")

        stats = {
            "num_rows": len(df),
            "num_columns": len(df.columns),
            "file_size_bytes": os.path.getsize(path),
            "file_path": str(path),
            "compression": None,
        }
        self._logger.info(
            f"Wrote {stats['num_rows']:,} books to {path} ({stats['file_size_bytes']:,} bytes)"
        )
        return stats

    def read_csv(self, path: PathLike) -> List[Book]:
        """
        Read books from a CSV file.

        Strings such as "NA" or "None" are kept as text. Only an empty
        category or year field is read as missing.
        """
        if not Path(path).exists():
            raise FileNotFoundError(f"Catalog not found: {path}")

        df = pd.read_csv(
            path,
            dtype={"title": str, "author": str, "category": str, "isbn": str},
            keep_default_na=False,
            na_values={"published_year": [""]},
            encoding="utf-8",
        )
        df["category"] = df["category"].where(df["category"] != "", None)
        books = books_from_dataframe(df)
        self._logger.info(f"Read {len(books):,} books from {path}")
        return books

    def read(self, path: PathLike) -> List[Book]:
        """
        Read a catalog, choosing the format from the file suffix.

        Args:
            path: Path to a .parquet or .csv file

        Returns:
            Books in file order

        Raises:
            ValueError: If the suffix is not a supported format
            FileNotFoundError: If the file does not exist
        """
        suffix = Path(path).suffix.lower()
        if suffix == ".parquet":
            return self.read_parquet(path)
        if suffix == ".csv":
            return self.read_csv(path)
        raise ValueError(f"Unsupported catalog format: {suffix or path}. Valid options: .parquet, .csv")

    def write(self, books: Iterable[Book], path: PathLike) -> dict:
        """Write a catalog, choosing the format from the file suffix, and return its statistics."""
        suffix = Path(path).suffix.lower()
        if suffix == ".parquet":
            return self.write_parquet(books, path)
        if suffix == ".csv":
            return self.write_csv(books, path)
        raise ValueError(f"Unsupported catalog format: {suffix or path}. Valid options: .parquet, .csv")
