from pathlib import Path
from typing import Any

import pytest
import requests
from pytest import MonkeyPatch

from readability_analyzer.errors import IngestError
from readability_analyzer.ingest import fetch_url_text, load_documents, strip_html


class _FakeResponse:
    def __init__(self, text: str, status_code: int = 200, content_type: str = "text/html"):
        self.text = text
        self.status_code = status_code
        self.headers = {"Content-Type": content_type}

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_load_documents_from_directory(tmp_path: Path):
    (tmp_path / "b.txt").write_text("Second file.", encoding="utf-8")
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "a.html").write_text("<p>Hello <b>there</b>.</p>", encoding="utf-8")
    (tmp_path / "skip.pdf").write_bytes(b"%PDF")

    documents = load_documents(tmp_path)
    assert [doc.doc_id for doc in documents] == ["b.txt", "nested/a.html"]
    assert documents[1].text == "Hello there ."


def test_load_documents_single_file(tmp_path: Path):
    path = tmp_path / "notes.md"
    path.write_text("# Title\n\nBody text.", encoding="utf-8")
    documents = load_documents(path)
    assert len(documents) == 1
    assert documents[0].doc_id == "notes.md"


def test_load_documents_rejects_unsupported_file(tmp_path: Path):
    path = tmp_path / "data.csv"
    path.write_text("a,b", encoding="utf-8")
    with pytest.raises(IngestError):
        load_documents(path)
    with pytest.raises(IngestError):
        load_documents(tmp_path / "missing.txt")


def test_strip_html_keeps_paragraphs():
    html = "<html><head><style>p {}</style></head><body><p>One.</p><p>Two.</p></body></html>"
    assert strip_html(html) == "One.\n\nTwo."


def test_fetch_url_text_strips_html(monkeypatch: MonkeyPatch):
    calls: list[dict[str, Any]] = []

    def fake_get(url: str, timeout: float) -> _FakeResponse:
        calls.append({"url": url, "timeout": timeout})
        return _FakeResponse("<html><body><p>Fetched text.</p></body></html>")

    monkeypatch.setattr(requests, "get", fake_get)
    assert fetch_url_text("https://example.com/page") == "Fetched text."
    assert calls == [{"url": "https://example.com/page", "timeout": 60}]


def test_fetch_url_text_wraps_http_errors(monkeypatch: MonkeyPatch):
    monkeypatch.setattr(
        requests, "get", lambda url, timeout: _FakeResponse("nope", status_code=404)
    )
    with pytest.raises(IngestError):
        fetch_url_text("https://example.com/missing")
