"""PokeAPI lookup client.

One GET per lookup, no auth, no retries. Responses are reduced to the
fields pokedeck renders: id, name, front sprite URL, and the speed stat.
"""

from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote

import requests

from pokedeck.models import DisplayRecord

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://pokeapi.co/api/v2/pokemon"
SPEED_STAT = "speed"


class PokedeckLookupError(Exception):
    """Base class for lookup failures."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"{key}: {reason}")
        self.key = key
        self.reason = reason


class NotFoundError(PokedeckLookupError):
    """The service answered with a non-success status."""


class LookupFailedError(PokedeckLookupError):
    """Transport error, timeout, or a response we could not decode."""


def normalize_query(raw: str) -> str:
    """Normalize user input for lookup: trimmed and lower-cased."""
    return raw.strip().lower()


def _read_speed(stats: Any) -> Optional[int]:
    """Find the base stat named 'speed'. Missing or malformed → None."""
    if not isinstance(stats, list):
        return None
    for entry in stats:
        if not isinstance(entry, dict):
            continue
        stat = entry.get("stat")
        if isinstance(stat, dict) and stat.get("name") == SPEED_STAT:
            value = entry.get("base_stat")
            if isinstance(value, int) and not isinstance(value, bool):
                return value
            return None
    return None


def parse_record(data: Any, key: str = "") -> DisplayRecord:
    """Map a PokeAPI pokemon record to a hidden DisplayRecord.

    Raises:
        LookupFailedError: if the record has no integer id.
    """
    if not isinstance(data, dict):
        raise LookupFailedError(key, "response is not a JSON object")
    record_id = data.get("id")
    if not isinstance(record_id, int) or isinstance(record_id, bool):
        raise LookupFailedError(key, "response has no integer id")

    sprites = data.get("sprites")
    image_url = ""
    if isinstance(sprites, dict):
        image_url = sprites.get("front_default") or ""

    return DisplayRecord(
        id=record_id,
        name=data.get("name") or "",
        image_url=image_url,
        speed=_read_speed(data.get("stats")),
        visible=False,
    )


class PokeApiClient:
    """Thin requests-based client for the pokemon endpoint."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout!r}")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def __enter__(self) -> PokeApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def fetch(self, key: str | int) -> DisplayRecord:
        """Look up one pokemon by id or name.

        Raises:
            NotFoundError: non-2xx status.
            LookupFailedError: transport error, timeout, or bad payload.
        """
        key = str(key)
        # Keys are a single path segment; "/", "?" and "#" must not reach the URL raw
        url = f"{self.base_url}/{quote(key, safe='')}"
        logger.debug("GET %s", url)
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise LookupFailedError(key, str(e)) from e

        if not resp.ok:
            raise NotFoundError(key, f"HTTP {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            raise LookupFailedError(key, "response is not valid JSON") from e
        return parse_record(data, key)
