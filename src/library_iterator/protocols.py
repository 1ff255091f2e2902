"""Protocol definitions for dependency inversion."""

from typing import Any, Callable, Optional, Protocol


class Categorized(Protocol):
    """Anything with a readable category, such as a ``Book``."""

    category: Optional[str]


# A predicate decides whether a cursor should stop on a given record.
BookPredicate = Callable[[Any], bool]


class LoggerProtocol(Protocol):
    """Protocol for logging."""

    def info(self, message: str) -> None:
        """Log info message."""
        ...

    def debug(self, message: str) -> None:
        """Log debug message."""
        ...

    def warning(self, message: str) -> None:
        """Log warning message."""
        ...

    def error(self, message: str) -> None:
        """Log error message."""
        ...
