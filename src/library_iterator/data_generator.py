"""Generate fake book catalogs using Faker library."""

import logging
from typing import Generator, List, Optional, Sequence

import pandas as pd
from faker import Faker

from .catalog import books_to_dataframe
from .models import Book, BookCategory

logger = logging.getLogger(__name__)


class BookGenerator:
    """Generate fake books for demos and testing."""

    def __init__(self, seed: int = 42, categories: Optional[Sequence[str]] = None):
        """Initialize the book generator.

        Args:
            seed: Random seed for reproducibility
            categories: Categories to draw from (defaults to every BookCategory)
        """
        self.faker = Faker()
        self.faker.seed_instance(seed)
        self.categories = list(categories) if categories else [c.value for c in BookCategory]

    def _fake_book(self) -> Book:
        return Book(
            title=self.faker.catch_phrase(),
            author=self.faker.name(),
            category=self.faker.random_element(self.categories),
            isbn=self.faker.isbn13(),
            published_year=int(self.faker.year()),
        )

    def iter_books(self, num_books: int) -> Generator[Book, None, None]:
        """Yield fake books one at a time.

        Args:
            num_books: Number of books to generate

        Yields:
            Book instances
        """
        if num_books < 0:
            raise ValueError("num_books must not be negative")

        for i in range(num_books):
            yield self._fake_book()

            if (i + 1) % 10000 == 0:
                logger.debug(f"Generated {i + 1:,} books...")

    def generate_books(self, num_books: int) -> List[Book]:
        """Generate a list of fake books.

        Args:
            num_books: Number of books to generate

        Returns:
            List of Book instances
        """
        logger.info(f"Generating {num_books:,} fake books...")
        books = list(self.iter_books(num_books))
        logger.info(f"Successfully generated {len(books):,} books")
        return books

    def generate_dataframe(self, num_books: int) -> pd.DataFrame:
        """Generate fake books and return them as a pandas DataFrame."""
        df = books_to_dataframe(self.generate_books(num_books))
        logger.info(f"Created DataFrame with {len(df):,} rows and {len(df.columns)} columns")
        return df
