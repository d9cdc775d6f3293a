"""Tests for external stylesheet loading."""
from __future__ import annotations

import httpx
import pytest

from css_inliner.errors import StylesheetLoadError
from css_inliner.sources import is_url, load_stylesheet


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _client(status_code: int = 200, text: str = "") -> httpx.Client:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code=status_code, text=text)

    return httpx.Client(transport=httpx.MockTransport(handler))


def _raising_client(exc: Exception) -> httpx.Client:
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc

    return httpx.Client(transport=httpx.MockTransport(handler))


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


class TestFiles:
    def test_reads_file(self, tmp_path):
        path = tmp_path / "mail.css"
        path.write_text("p { color: red; }", encoding="utf-8")
        assert load_stylesheet(str(path)) == "p { color: red; }"

    def test_missing_file(self, tmp_path):
        missing = str(tmp_path / "nope.css")
        with pytest.raises(StylesheetLoadError) as info:
            load_stylesheet(missing)
        assert info.value.source == missing
        assert isinstance(info.value.cause, OSError)


# ---------------------------------------------------------------------------
# URLs
# ---------------------------------------------------------------------------


class TestUrls:
    def test_is_url(self):
        assert is_url("https://example.com/a.css")
        assert is_url("http://example.com/a.css")
        assert not is_url("styles/a.css")

    def test_fetches(self):
        css = load_stylesheet("https://example.com/a.css", client=_client(text="p { margin: 0; }"))
        assert css == "p { margin: 0; }"

    def test_error_status(self):
        with pytest.raises(StylesheetLoadError, match="404"):
            load_stylesheet("https://example.com/a.css", client=_client(status_code=404))

    def test_timeout(self):
        client = _raising_client(httpx.ReadTimeout("slow"))
        with pytest.raises(StylesheetLoadError, match="Timed out"):
            load_stylesheet("https://example.com/a.css", client=client)

    def test_connect_error(self):
        client = _raising_client(httpx.ConnectError("refused"))
        with pytest.raises(StylesheetLoadError) as info:
            load_stylesheet("https://example.com/a.css", client=client)
        assert isinstance(info.value.cause, httpx.ConnectError)
