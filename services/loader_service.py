"""
services/loader_service.py – Fetch the compatibility list with a local fallback.

The primary source is the upstream JSON document, fetched asynchronously.
On any fetch failure (network error or non-success status) exactly one retry
is made against the fallback, normally the copy bundled next to the
application.  A document that was fetched but does not match the schema is a
parse error and is not retried.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

import httpx
from pydantic import ValidationError

from models.compat_entry import CompatEntry
from models.schemas import EntryListAdapter
from services.exceptions import EntryParseError, LoadError

logger = logging.getLogger(__name__)

# ── Configuration ────────────────────────────────────────────────────────────

PRIMARY_URL: str = (
    "https://raw.githubusercontent.com/azahar-emu/compatibility-list/"
    "master/compatibility_list.json"
)

# Looked up beneath the application base directory (see main.py).
FALLBACK_FILENAME: str = "compatibility_list.json"

# HTTP timeout (seconds)
HTTP_TIMEOUT: float = 30.0

# ── Types ────────────────────────────────────────────────────────────────────

Source = Union[str, Path]


@dataclass(frozen=True)
class LoadResult:
    """
    Attributes
    ----------
    entries   : Parsed collection, in document order.
    source    : URL or path the collection was read from.
    fell_back : True when the primary source failed.
    """

    entries: Tuple[CompatEntry, ...]
    source: str
    fell_back: bool = False


# ── Public API ───────────────────────────────────────────────────────────────


def fallback_path() -> Path:
    """Bundled copy of the list, resolved from COMPATLIST_BASE."""
    base = Path(os.environ.get("COMPATLIST_BASE", os.path.abspath(".")))
    return base / FALLBACK_FILENAME


def parse_entries(raw: Union[bytes, str], source: str = "<memory>") -> Tuple[CompatEntry, ...]:
    """
    Validate a JSON document and convert it to entries.

    Raises
    ------
    EntryParseError
        When *raw* is not JSON or does not match the entry schema.
    """
    try:
        models = EntryListAdapter.validate_json(raw)
    except ValidationError as exc:
        raise EntryParseError(source, _summarise(exc)) from exc
    return tuple(m.to_entry() for m in models)


async def load_entries_async(
    primary_url: str = PRIMARY_URL,
    fallback: Optional[Source] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> LoadResult:
    """
    Load the collection, trying *primary_url* then *fallback* once.

    Parameters
    ----------
    primary_url : Remote JSON document.
    fallback    : Local path or http(s) URL; defaults to fallback_path().
    client      : Optional httpx.AsyncClient (the caller keeps ownership).

    Raises
    ------
    LoadError
        When both sources fail to fetch.
    EntryParseError
        When the fetched document is malformed.
    """
    fallback = fallback if fallback is not None else fallback_path()
    if client is None:
        async with httpx.AsyncClient(timeout=HTTP_TIMEOUT, follow_redirects=True) as owned:
            return await load_entries_async(primary_url, fallback, client=owned)

    try:
        raw = await _fetch_url(client, primary_url)
        return _finish(raw, primary_url, fell_back=False)
    except EntryParseError:
        raise
    except LoadError as primary_exc:
        logger.warning("Primary fetch failed, trying fallback: %s", primary_exc)
        try:
            if _is_url(fallback):
                raw = await _fetch_url(client, str(fallback))
            else:
                raw = _read_file(Path(fallback))
        except LoadError as fallback_exc:
            logger.error("Failed to fetch compatibility data: %s", fallback_exc)
            raise LoadError(
                f"{primary_exc}\nFallback also failed: {fallback_exc}"
            ) from fallback_exc
    return _finish(raw, str(fallback), fell_back=True)


# ── Private helpers ───────────────────────────────────────────────────────────


def _finish(raw: bytes, source: str, *, fell_back: bool) -> LoadResult:
    entries = parse_entries(raw, source)
    logger.info("Loaded %d entries from %s", len(entries), source)
    return LoadResult(entries=entries, source=source, fell_back=fell_back)


def _is_url(source: Source) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


def _check_response(response: httpx.Response, url: str) -> bytes:
    if not response.is_success:
        raise LoadError(f"Fetch of {url} failed: HTTP {response.status_code}.")
    return response.content


async def _fetch_url(client: httpx.AsyncClient, url: str) -> bytes:
    try:
        response = await client.get(url)
    except httpx.RequestError as exc:
        raise LoadError(f"Network error while fetching {url}: {exc}") from exc
    return _check_response(response, url)


def _read_file(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise LoadError(f"Cannot read local list '{path}': {exc}") from exc


def _summarise(exc: ValidationError) -> str:
    first = exc.errors()[0]
    loc = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
    more = exc.error_count() - 1
    suffix = f" (+{more} more)" if more > 0 else ""
    return f"{loc}: {first.get('msg', 'invalid value')}{suffix}"
