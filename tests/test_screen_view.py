"""Tests for the display page rendering."""

from mention_relay.adapters.web.views import render_screen
from mention_relay.domain.models import MediaRecord


def test_screen_shows_current_media_url() -> None:
    """Given a record, when rendering, then the image points at its media URL."""
    html = render_screen(
        MediaRecord(media_url="https://x/img.jpg?a=1&b=2"), title="Wall", hint="Tag us"
    )

    assert 'src="https://x/img.jpg?a=1&amp;b=2"' in html
    assert "<title>Wall</title>" in html
    assert "Tag us" in html
    assert 'new EventSource("/events")' in html


def test_screen_with_empty_record_has_blank_image() -> None:
    """Given the empty record, when rendering, then the image source is empty."""
    html = render_screen(MediaRecord.empty(), title="Wall", hint="")

    assert 'src=""' in html


def test_screen_escapes_untrusted_text() -> None:
    """Given markup in caption and hint, when rendering, then it is escaped."""
    html = render_screen(
        MediaRecord(media_url="https://x/img.jpg", caption='"><script>alert(1)</script>'),
        title="Wall",
        hint="<b>hi</b>",
    )

    assert "<script>alert(1)</script>" not in html
    assert "&lt;b&gt;hi&lt;/b&gt;" in html
