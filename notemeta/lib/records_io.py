"""
records_io.py - I/O for IndexEntry JSON files

Shared utilities for loading and saving imported entries.
Used by: tools/importer.py
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict

from pydantic import ValidationError

from notemeta.models import IndexEntry

log = logging.getLogger("notemeta.records_io")


def load_all_entries(records_dir: Path) -> Dict[str, IndexEntry]:
    """
    Load all entries from records_dir.

    Args:
        records_dir: Path to directory containing IndexEntry JSON files

    Returns:
        Dict[id -> IndexEntry]

    Note:
        - Logs warnings for invalid files but continues loading
        - Missing records_dir yields an empty dict
    """
    entries = {}
    invalid_count = 0

    for entry_file in sorted(records_dir.glob("*.json")):
        entry = _read_entry(entry_file)
        if entry is None:
            invalid_count += 1
            continue
        entries[entry.id] = entry

    if invalid_count > 0:
        log.warning("entries_skipped loaded=%d invalid=%d dir=%s", len(entries), invalid_count, records_dir)

    return entries


def save_entry(entry: IndexEntry, records_dir: Path) -> Path:
    """
    Save a single entry as {id}.json.

    Args:
        entry: IndexEntry to save
        records_dir: Directory to save to (created if missing)

    Returns:
        Path to saved file

    Raises:
        OSError: If file cannot be written
    """
    records_dir.mkdir(parents=True, exist_ok=True)
    out_path = records_dir / f"{entry.id}.json"

    entry_json = entry.model_dump(mode="json")

    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(entry_json, f, indent=2, ensure_ascii=False, default=str)

    return out_path


def load_entry(entry_id: str, records_dir: Path) -> IndexEntry | None:
    """
    Load a single entry by id.

    Returns:
        IndexEntry or None if not found or invalid
    """
    entry_file = records_dir / f"{entry_id}.json"

    if not entry_file.exists():
        return None

    return _read_entry(entry_file)


def _read_entry(entry_file: Path) -> IndexEntry | None:
    try:
        with open(entry_file, "r", encoding="utf-8") as f:
            return IndexEntry(**json.load(f))
    except json.JSONDecodeError as e:
        log.warning("entry_invalid_json path=%s error=%s", entry_file, e)
    except (ValidationError, TypeError) as e:
        log.warning("entry_invalid path=%s error=%s", entry_file, e)
    return None
