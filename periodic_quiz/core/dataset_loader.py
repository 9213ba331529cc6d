"""Loading the periodic table dataset from the network or a local file.

The expected document is Periodic-Table-JSON: an object with an
``elements`` array, each entry carrying ``number``, ``symbol``, ``name``,
``category``, ``xpos``, ``ypos`` and the physical properties the quiz asks
about. A bare array of entries is accepted too.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import httpx

from periodic_quiz.constants.dataset_constants import DATA_URL, DATASET_TIMEOUT_SECONDS
from periodic_quiz.core.models import DatasetLoadError, ElementRecord

logger = logging.getLogger(__name__)


def parse_elements(payload: Any) -> tuple[ElementRecord, ...]:
    """Turn a decoded dataset document into element records."""
    if isinstance(payload, dict):
        entries = payload.get("elements")
    else:
        entries = payload
    if not isinstance(entries, list):
        raise DatasetLoadError("Dataset does not contain an 'elements' list.")

    elements: list[ElementRecord] = []
    seen_numbers: set[int] = set()
    seen_symbols: set[str] = set()
    for entry in entries:
        if not isinstance(entry, dict):
            raise DatasetLoadError(f"Element entry must be an object, got {type(entry).__name__}.")
        element = ElementRecord.from_dict(entry)
        if element.number in seen_numbers:
            raise DatasetLoadError(f"Duplicate atomic number {element.number} in dataset.")
        if element.symbol in seen_symbols:
            raise DatasetLoadError(f"Duplicate symbol {element.symbol!r} in dataset.")
        seen_numbers.add(element.number)
        seen_symbols.add(element.symbol)
        elements.append(element)
    return tuple(elements)


def fetch_elements(
    url: str = DATA_URL,
    timeout: float = DATASET_TIMEOUT_SECONDS,
    client: httpx.Client | None = None,
) -> tuple[ElementRecord, ...]:
    """Download and parse the dataset. Network and decoding errors become DatasetLoadError."""
    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=timeout, follow_redirects=True)
    try:
        response = client.get(url)
        response.raise_for_status()
        payload = response.json()
    except httpx.HTTPError as exc:
        raise DatasetLoadError(f"Failed to fetch element data from {url}: {exc}") from exc
    except ValueError as exc:
        raise DatasetLoadError(f"Element data from {url} is not valid JSON: {exc}") from exc
    finally:
        if owns_client:
            client.close()

    elements = parse_elements(payload)
    logger.info("Loaded %d elements from %s", len(elements), url)
    return elements


def load_elements_from_file(file_path: Path) -> tuple[ElementRecord, ...]:
    """Read a local copy of the dataset."""
    try:
        payload = json.loads(Path(file_path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise DatasetLoadError(f"Cannot read element data file {file_path}: {exc}") from exc
    except ValueError as exc:
        raise DatasetLoadError(f"Element data file {file_path} is not valid JSON: {exc}") from exc

    elements = parse_elements(payload)
    logger.info("Loaded %d elements from %s", len(elements), file_path)
    return elements


def load_elements(
    url: str = DATA_URL,
    fallback_path: Path | None = None,
    client: httpx.Client | None = None,
) -> tuple[ElementRecord, ...]:
    """Fetch the dataset, reading ``fallback_path`` instead when the download fails.

    The download error is re-raised when no fallback file exists.
    """
    try:
        return fetch_elements(url, client=client)
    except DatasetLoadError:
        if fallback_path is None or not Path(fallback_path).exists():
            raise
        logger.warning("Download failed; reading element data from %s", fallback_path, exc_info=True)
    return load_elements_from_file(fallback_path)
