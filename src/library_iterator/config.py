"""Configuration management for the application."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .models import BookCategory

# Load environment variables from .env file
load_dotenv()


@dataclass
class AppConfig:
    """Application configuration parameters."""

    target_category: str = BookCategory.FICTION.value
    num_books: int = 20
    seed: int = 42
    catalog_path: Optional[str] = None
    output_path: Optional[str] = None
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.num_books < 0:
            raise ValueError("num_books must not be negative")
        if not self.target_category:
            raise ValueError("target_category must not be empty")

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load application configuration from environment variables.

        - CATALOG_PATH set: books are read from that .parquet/.csv file
        - Otherwise NUM_BOOKS fake books are generated with GENERATOR_SEED
        - OUTPUT_PATH set: the catalog is also written there
        """
        return cls(
            target_category=os.getenv("TARGET_CATEGORY", BookCategory.FICTION.value),
            num_books=int(os.getenv("NUM_BOOKS", "20")),
            seed=int(os.getenv("GENERATOR_SEED", "42")),
            catalog_path=os.getenv("CATALOG_PATH") or None,
            output_path=os.getenv("OUTPUT_PATH") or None,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


def get_app_config() -> AppConfig:
    """Get application configuration."""
    return AppConfig.from_env()
