"""Storage of last week's rottening issue count."""

import logging
from pathlib import Path

from ..errors import CounterFileError

logger = logging.getLogger(__name__)

DEFAULT_COUNTER_FILE = "issues-last-week.txt"


class CounterStore:
    """Persists a single non-negative integer as plain text."""

    def __init__(self, path: str | Path = DEFAULT_COUNTER_FILE):
        """Initialize counter store.

        Args:
            path: File holding the count from the previous run
        """
        self.path = Path(path)

    def read(self) -> int:
        """Read the stored count.

        Returns:
            Count written by the previous run

        Raises:
            CounterFileError: If the file is missing, unreadable or does not
                hold a non-negative integer
        """
        try:
            content = self.path.read_text(encoding="ascii")
        except (OSError, UnicodeDecodeError) as e:
            raise CounterFileError(
                f"Could not read issue count from {self.path}: {e}"
            ) from e

        text = content.strip()
        # Plain decimal digits only: no sign, no underscores
        if not (text.isascii() and text.isdigit()):
            raise CounterFileError(
                f"Expected a non-negative integer in {self.path}, found {content!r}"
            )
        count = int(text)

        logger.debug("Read count %d from %s", count, self.path)
        return count

    def write(self, count: int) -> None:
        """Overwrite the stored count.

        Raises:
            ValueError: If count is negative
            CounterFileError: If the file cannot be written
        """
        if count < 0:
            raise ValueError(f"Issue count must be >= 0, got {count}")

        try:
            self.path.write_text(str(count), encoding="ascii")
        except OSError as e:
            raise CounterFileError(
                f"Could not write issue count to {self.path}: {e}"
            ) from e

        logger.debug("Wrote count %d to %s", count, self.path)
