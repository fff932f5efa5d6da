"""Runtime settings for pokedeck, read from the environment.

Environment variables:
    POKEDECK_API_URL    pokemon endpoint (default: public PokeAPI)
    POKEDECK_DATA_FILE  storage file (default: ~/.pokedeck/storage.json)
    POKEDECK_TIMEOUT    per-request timeout in seconds (default: 10)

CLI options override whatever is set here.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from pokedeck.lookup import DEFAULT_API_URL

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT_S = 10.0


def _default_data_file() -> Path:
    return Path.home() / ".pokedeck" / "storage.json"


@dataclass
class Settings:
    api_url: str = DEFAULT_API_URL
    data_file: Path = field(default_factory=_default_data_file)
    timeout_s: float = _DEFAULT_TIMEOUT_S
    ephemeral: bool = False


def load_settings(
    env: Optional[dict[str, str]] = None,
    api_url: Optional[str] = None,
    data_file: Optional[Path] = None,
    ephemeral: bool = False,
) -> Settings:
    """Build Settings from env vars, with explicit arguments taking priority.

    Args:
        env: Mapping to read instead of os.environ (tests pass a dict).
        api_url: Override for POKEDECK_API_URL.
        data_file: Override for POKEDECK_DATA_FILE.
        ephemeral: Keep the collection in memory only.
    """
    env = os.environ if env is None else env

    timeout_s = _DEFAULT_TIMEOUT_S
    raw_timeout = env.get("POKEDECK_TIMEOUT")
    if raw_timeout:
        try:
            value = float(raw_timeout)
        except ValueError:
            value = None
        if value is None or not math.isfinite(value) or value <= 0:
            logger.warning("Ignoring invalid POKEDECK_TIMEOUT=%r", raw_timeout)
        else:
            timeout_s = value

    env_file = env.get("POKEDECK_DATA_FILE")
    return Settings(
        api_url=api_url or env.get("POKEDECK_API_URL") or DEFAULT_API_URL,
        data_file=data_file or (Path(env_file).expanduser() if env_file else _default_data_file()),
        timeout_s=timeout_s,
        ephemeral=ephemeral,
    )
