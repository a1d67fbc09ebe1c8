"""Wiki link rendering.

A wiki link is a bare alphanumeric word in square brackets, e.g. ``[FooBar]``,
rendered as a hyperlink to that word's view page.
"""

import re

from markupsafe import Markup

# Pattern for wiki links: [PageName]
WIKI_LINK_PATTERN = re.compile(rb"\[([a-zA-Z0-9]+)\]")


def _link_for(m: re.Match) -> bytes:
    """Convert a wiki link match to an HTML anchor."""
    word = m.group(1)
    return b'<a href="/view/' + word + b'">' + word + b"</a>"


def rewrite_links(body: bytes) -> bytes:
    """Replace every ``[Word]`` in body with an anchor to ``/view/Word``.

    Args:
        body: Raw page body.

    Returns:
        The body with wiki links rewritten; all other bytes are unchanged.
    """
    return WIKI_LINK_PATTERN.sub(_link_for, body)


def render_links(body: bytes | None) -> Markup:
    """Render a page body for display, marked safe for direct inclusion.

    The body is trusted as-is; only the generated anchors are added.
    """
    if not body:
        return Markup("")
    return Markup(rewrite_links(body).decode("utf-8", errors="replace"))
