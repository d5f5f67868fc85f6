"""Persistent JSON defaults and environment lookups.

Stores default listing preferences (block size, classify, human-readable
sizes, hidden-file visibility). All access is defensive: malformed or missing
config falls back safely.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .listing.options import DEFAULT_BLOCK_SIZE

APP_NAME = "gridls"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class ListingDefaults:
    """Defaults applied before command-line flags."""

    block_size: int = DEFAULT_BLOCK_SIZE
    classify: bool = False
    human_readable: bool = False
    show_hidden: bool = False


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_positive_int(value: object) -> int | None:
    """Booleans and non-integers are treated as invalid."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def _coerce_bool(value: object, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def env_block_size(environ: Mapping[str, str] | None = None) -> int | None:
    """Return ``BLOCKSIZE`` as a positive integer, or ``None`` when unset/invalid."""
    env = os.environ if environ is None else environ
    raw = env.get("BLOCKSIZE")
    if raw is None:
        return None
    try:
        parsed = int(raw.strip())
    except ValueError:
        return None
    return parsed if parsed > 0 else None


def load_listing_defaults(environ: Mapping[str, str] | None = None) -> ListingDefaults:
    """Merge built-in defaults, the config file, then the environment."""
    data = load_config()
    block_size = _coerce_positive_int(data.get("block_size")) or DEFAULT_BLOCK_SIZE
    env_size = env_block_size(environ)
    if env_size is not None:
        block_size = env_size
    return ListingDefaults(
        block_size=block_size,
        classify=_coerce_bool(data.get("classify"), False),
        human_readable=_coerce_bool(data.get("human_readable"), False),
        show_hidden=_coerce_bool(data.get("show_hidden"), False),
    )


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "ListingDefaults",
    "load_config",
    "env_block_size",
    "load_listing_defaults",
]
