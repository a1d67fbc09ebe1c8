"""Storage abstraction for wiki pages."""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)


class PageNotFoundError(FileNotFoundError):
    """Raised when a page has no backing file."""

    def __init__(self, title: str):
        super().__init__(f"page not found: {title}")
        self.title = title


class Storage(ABC):
    """Abstract base class for page storage."""

    @abstractmethod
    async def load(self, title: str) -> bytes:
        """Return the page body. Raises OSError if it can't be read."""
        ...

    @abstractmethod
    async def save(self, title: str, body: bytes) -> None:
        """Write the page body, replacing any previous content."""
        ...


class FileStorage(Storage):
    """File-based storage implementation.

    One file per page, named ``<title>.txt``, holding the raw body bytes.
    Titles are used verbatim; the router only lets alphanumeric titles
    through.
    """

    SUFFIX = ".txt"
    DIR_MODE = 0o755
    FILE_MODE = 0o600

    def __init__(self, base_path: Path):
        self.base_path = base_path
        self.base_path.mkdir(mode=self.DIR_MODE, parents=True, exist_ok=True)

    def _get_path(self, title: str) -> Path:
        """Get full path for a page."""
        return self.base_path / f"{title}{self.SUFFIX}"

    async def load(self, title: str) -> bytes:
        """Read the full page body."""
        path = self._get_path(title)
        try:
            return path.read_bytes()
        except FileNotFoundError as exc:
            logger.debug("Page %s not found at %s", title, path)
            raise PageNotFoundError(title) from exc

    async def save(self, title: str, body: bytes) -> None:
        """Write the page body, creating the file with owner-only permissions."""
        path = self._get_path(title)
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, self.FILE_MODE)
        with os.fdopen(fd, "wb") as f:
            f.write(body)
        logger.info("Saved page %s (%d bytes)", title, len(body))
