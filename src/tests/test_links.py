"""Unit tests for wiki link rendering."""

from markupsafe import Markup, escape

from flatwiki.core.links import render_links, rewrite_links


# ============================================================
# rewrite_links
# ============================================================


class TestRewriteLinks:
    def test_basic_link(self):
        assert rewrite_links(b"[FooBar]") == b'<a href="/view/FooBar">FooBar</a>'

    def test_link_in_text(self):
        out = rewrite_links(b"Hello [World]!")
        assert out == b'Hello <a href="/view/World">World</a>!'

    def test_multiple_links(self):
        out = rewrite_links(b"See [Page1] and [Page2]")
        assert b'href="/view/Page1"' in out
        assert b'href="/view/Page2"' in out

    def test_adjacent_links(self):
        out = rewrite_links(b"[A][B]")
        assert out == b'<a href="/view/A">A</a><a href="/view/B">B</a>'

    def test_digits(self):
        assert rewrite_links(b"[123]") == b'<a href="/view/123">123</a>'

    def test_empty_brackets_unchanged(self):
        assert rewrite_links(b"[]") == b"[]"

    def test_punctuation_unchanged(self):
        assert rewrite_links(b"[abc-123]") == b"[abc-123]"

    def test_spaces_unchanged(self):
        assert rewrite_links(b"[My Page]") == b"[My Page]"

    def test_double_brackets(self):
        out = rewrite_links(b"[[Page]]")
        assert out == b'[<a href="/view/Page">Page</a>]'

    def test_non_ascii_word_unchanged(self):
        body = "[Café]".encode("utf-8")
        assert rewrite_links(body) == body

    def test_no_links(self):
        assert rewrite_links(b"plain text") == b"plain text"


# ============================================================
# render_links
# ============================================================


class TestRenderLinks:
    def test_returns_markup(self):
        html = render_links(b"[Home]")
        assert isinstance(html, Markup)
        assert str(html) == '<a href="/view/Home">Home</a>'

    def test_not_escaped_when_interpolated(self):
        html = render_links(b"[Home]")
        assert escape(html) == html

    def test_none_body(self):
        assert render_links(None) == Markup("")

    def test_empty_body(self):
        assert render_links(b"") == Markup("")

    def test_utf8_body(self):
        html = render_links("Grüße [Welt]".encode("utf-8"))
        assert str(html) == 'Grüße <a href="/view/Welt">Welt</a>'

    def test_invalid_utf8_replaced(self):
        html = render_links(b"bad \xff byte")
        assert "�" in str(html)
