"""Main entry point for the library iterator demo."""

import logging
import sys
import time
from typing import List

from .catalog import BookCatalog
from .config import AppConfig, get_app_config
from .data_generator import BookGenerator
from .library import Library
from .models import Book

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO"):
    """Configure logging level.

    Args:
        level: Name of the root logging level (DEBUG, INFO, ...)
    """
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))


def load_books(config: AppConfig) -> List[Book]:
    """Read the configured catalog, or generate a fake one.

    Args:
        config: Application configuration

    Returns:
        Books in catalog order
    """
    catalog = BookCatalog()
    if config.catalog_path:
        logger.info(f"Loading catalog from {config.catalog_path}")
        books = catalog.read(config.catalog_path)
    else:
        logger.info(f"Generating {config.num_books:,} books (seed={config.seed})")
        books = BookGenerator(seed=config.seed).generate_books(config.num_books)

    if config.output_path:
        catalog.write(books, config.output_path)

    return books


def print_summary(library: Library, matches: List[Book], target_category: str, elapsed: float):
    """Print summary statistics.

    Args:
        library: Library that was traversed
        matches: Books returned by the cursor, in order
        target_category: Category the cursor accepted
        elapsed: Time taken by the traversal in seconds
    """
    print("\n" + "=" * 80)
    print("TRAVERSAL SUMMARY")
    print("=" * 80)

    print("\nLibrary:")
    print(f"  Total books: {len(library):,}")
    for category, count in sorted(library.count_by_category().items()):
        print(f"  {category}: {count:,}")

    print(f"\n{target_category} books:")
    for book in matches:
        print(f"  {book.title} - {book.author}")

    print("\nCursor:")
    print(f"  Matches: {len(matches):,}")
    print(f"  Time taken: {elapsed:.4f} seconds")

    print("\n" + "=" * 80)


def main():
    """Main execution function."""
    try:
        config = get_app_config()
        setup_logging(config.log_level)

        logger.info("Starting library iterator")
        logger.info(f"Target category: {config.target_category}")

        library = Library(load_books(config))
        cursor = library.category_iterator(config.target_category)

        start_time = time.time()
        matches = []
        while not cursor.is_exhausted():
            matches.append(cursor.advance())
        elapsed = time.time() - start_time

        logger.info(f"Traversal finished: {cursor!r}")
        print_summary(library, matches, config.target_category, elapsed)

        logger.info("Execution completed successfully!")
        return 0

    except KeyboardInterrupt:
        logger.warning("Execution interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Error during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
