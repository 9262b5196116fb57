"""Reading and parsing JSON documents from disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from json_structural_diff.errors import MalformedInput

__all__ = ["dump_document", "load_document"]

logger = logging.getLogger(__name__)


def load_document(path: str | Path) -> Any:
    """Read ``path`` fully and parse it as JSON.

    Raises:
        MalformedInput: The file cannot be read or is not valid JSON.
    """
    path = Path(path)
    logger.debug("loading %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MalformedInput(path, f"cannot read file ({exc})") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedInput(path, f"invalid JSON ({exc})") from exc


def dump_document(value: Any) -> str:
    """Pretty-print a parsed document for manual inspection."""
    return json.dumps(value, indent=2, ensure_ascii=False)
