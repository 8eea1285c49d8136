"""Loading JSON samples for the command line.

Every loader returns ``(source, data)`` where source describes where the
sample came from; any read, transport or parse failure becomes a
JSONLoaderError.
"""

import json
import sys
from pathlib import Path
from typing import Any, TextIO
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)

Loaded = tuple[str, Any]


class JSONLoaderError(Exception):
    """A JSON sample could not be read or parsed."""

    pass


def parse_json_text(text: str, source: str = "<string>") -> Any:
    """Parse text, naming source and the error position on failure."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug("Parse failure in %s", source, exc_info=True)
        raise JSONLoaderError(
            f"Invalid JSON in {source}: {e.msg} (line {e.lineno}, column {e.colno})"
        ) from e


def load_json_from_file(file_path: str | Path) -> Loaded:
    """Read and parse a local JSON file.

    A missing ``.json`` suffix is only logged; the content decides.

    Raises:
        JSONLoaderError: If the path is not a readable file of valid JSON.
    """
    path = Path(file_path)
    if not path.is_file():
        raise JSONLoaderError(f"File not found: {path}")

    if path.suffix.lower() != ".json":
        logger.warning("%s has no .json suffix, parsing anyway", path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise JSONLoaderError(f"Cannot read {path}: {e}") from e

    data = parse_json_text(text, str(path))
    logger.info("Loaded sample from %s", path)
    return str(path), data


def load_json_from_url(url: str, timeout: int = 30) -> Loaded:
    """Fetch and parse JSON over HTTP(S).

    Args:
        url: ``http`` or ``https`` URL.
        timeout: Seconds before the request is abandoned.

    Raises:
        JSONLoaderError: If the URL is not HTTP(S), the request fails or
            returns an error status, or the body is not valid JSON.
    """
    parts = urlparse(url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise JSONLoaderError(f"Invalid URL: {url}")

    logger.debug("GET %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        raise JSONLoaderError(f"Request timeout after {timeout}s: {url}") from e
    except requests.exceptions.ConnectionError as e:
        raise JSONLoaderError(f"Connection error: {url}") from e
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else "?"
        raise JSONLoaderError(f"HTTP error {status}: {url}") from e
    except requests.exceptions.RequestException as e:
        raise JSONLoaderError(f"Request failed for {url}: {e}") from e

    content_type = response.headers.get("content-type", "")
    if "json" not in content_type.lower():
        logger.warning("%s answered with content type %r", url, content_type)

    data = parse_json_text(response.text, url)
    logger.info("Loaded sample from %s", url)
    return url, data


def load_json_from_stream(stream: TextIO | None = None) -> Loaded:
    """Read and parse a whole text stream (stdin by default)."""
    stream = stream or sys.stdin
    name = getattr(stream, "name", "<stdin>")
    return name, parse_json_text(stream.read(), name)


def load_json(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> Loaded:
    """Load from exactly one of file_path or url."""
    if file_path and url:
        raise JSONLoaderError("Cannot specify both file_path and url")
    if file_path:
        return load_json_from_file(file_path)
    if url:
        return load_json_from_url(url, timeout)
    raise JSONLoaderError("Either file_path or url must be provided")
