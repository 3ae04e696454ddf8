"""Helpers for loading the JSON data files shipped with the package."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Root of the medinotes package.
BASE_DIR = Path(__file__).resolve().parent.parent


def _resolve_path(filepath: str | Path) -> Path:
    """Return an absolute path, resolving relative paths against the package root."""
    path = Path(filepath)
    return path if path.is_absolute() else BASE_DIR / path


def load_json_file(filepath: str | Path) -> Any:
    """Read a JSON file and return its content."""
    path = _resolve_path(filepath)
    try:
        with path.open("r", encoding="utf-8") as file:
            data = json.load(file)
    except FileNotFoundError:
        logger.error("File not found: %s", path)
        raise
    except json.JSONDecodeError as exc:
        logger.error("JSON format error for %s: %s", path, exc)
        raise
    logger.debug("File loaded: %s", path)
    return data


def require_keys(record: Any, keys: tuple[str, ...], label: str) -> dict[str, Any]:
    """Return the record when it is a dict carrying every key, else raise ValueError."""
    if not isinstance(record, dict):
        raise ValueError(f"{label}: expected a JSON object.")
    missing = [key for key in keys if key not in record]
    if missing:
        raise ValueError(f"{label}: missing field(s) {', '.join(missing)}.")
    return record
