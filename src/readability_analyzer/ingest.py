from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List

import requests
from bs4 import BeautifulSoup

from .errors import IngestError
from .models import SourceText

logger = logging.getLogger(__name__)

SUPPORTED_INPUT_EXTENSIONS = {".txt", ".md", ".html", ".htm"}
HTML_EXTENSIONS = {".html", ".htm"}
BLOCK_TAGS = ["p", "div", "br", "li", "h1", "h2", "h3", "h4", "h5", "h6", "blockquote"]

_HORIZONTAL_SPACE_RE = re.compile(r"[ \t\f\v]+")
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def load_documents(input_path: Path) -> List[SourceText]:
    """Expand a file or directory into SourceText entries keyed by relative path."""
    if not input_path.exists():
        raise IngestError(f"Input path {input_path} does not exist.")
    if input_path.is_file():
        return [_source_from_file(input_path, input_path.name)]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    if not files:
        logger.warning("No supported files found under %s.", input_path)
    sources = [
        _source_from_file(file, file.relative_to(input_path).as_posix())
        for file in files
    ]
    logger.info("Loaded %d documents from %s.", len(sources), input_path)
    return sources


def fetch_url_text(url: str, timeout: float = 60) -> str:
    """Download ``url`` and return its readable text."""
    if not url:
        raise IngestError("A URL is required.")
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise IngestError(f"Could not fetch {url}: {exc}") from exc
    text = response.text
    content_type = response.headers.get("Content-Type", "")
    if "html" in content_type.lower() or "<html" in text.lower():
        text = strip_html(text)
    logger.info("Fetched %d characters from %s.", len(text), url)
    return text


def strip_html(html: str) -> str:
    """Extract visible text from HTML, keeping block elements as paragraphs."""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    for tag in soup.find_all(BLOCK_TAGS):
        tag.append("\n\n")
    text = soup.get_text(separator=" ")
    lines = [_HORIZONTAL_SPACE_RE.sub(" ", line).strip() for line in text.split("\n")]
    return _BLANK_RUN_RE.sub("\n\n", "\n".join(lines)).strip()


def _source_from_file(path: Path, doc_id: str) -> SourceText:
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_INPUT_EXTENSIONS:
        raise IngestError(f"Unsupported file type '{suffix}' for {path}.")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise IngestError(f"Could not read {path}: {exc}") from exc
    if suffix in HTML_EXTENSIONS:
        text = strip_html(text)
    return SourceText(doc_id=doc_id, text=text)
