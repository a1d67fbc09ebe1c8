"""Data models for FlatWiki."""

from pydantic import BaseModel

FRONT_PAGE_TITLE = "FrontPage"


class Page(BaseModel):
    """Represents a wiki page.

    ``body`` is ``None`` for a page that has no backing file yet and
    ``b""`` for a page whose file exists but is empty.
    """

    title: str
    body: bytes | None = None

    @property
    def is_front(self) -> bool:
        """True for the reserved front page (case-insensitive) or an empty title."""
        return self.title.lower() == FRONT_PAGE_TITLE.lower() or self.title == ""

    @property
    def body_text(self) -> str:
        """Body decoded for display in the edit form."""
        if not self.body:
            return ""
        return self.body.decode("utf-8", errors="replace")
