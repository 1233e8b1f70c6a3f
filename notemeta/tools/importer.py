"""
importer.py - Markdown → Spotlight-style attributes

- Reads and decodes the file (UTF-8 by default)
- Extracts metadata (frontmatter, heading fallback, full text)
- Maps canonical attributes to kMDItem* keys
- Optionally writes IndexEntry JSONs to a records directory

Usage:
    python -m notemeta.tools.importer notes/
    python -m notemeta.tools.importer notes/weekly-sync.md --no-text
    python -m notemeta.tools.importer notes/ --records-dir data/records
"""

from __future__ import annotations

import sys
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional
from datetime import datetime, timezone

from notemeta.lib.config import get_config_value, get_records_dir
from notemeta.lib.dates import DateDetector
from notemeta.lib.frontmatter import scan
from notemeta.lib.records_io import save_entry
from notemeta.lib.utils import compute_entry_id, compute_sha256
from notemeta.models import Attribute, IndexEntry, MetadataRecord

log = logging.getLogger("notemeta.importer")

MARKDOWN_SUFFIXES = (".md", ".markdown")

SPOTLIGHT_KEYS: Dict[Attribute, str] = {
    Attribute.TITLE: "kMDItemTitle",
    Attribute.SUBJECT: "kMDItemSubject",
    Attribute.DISPLAY_NAME: "kMDItemDisplayName",
    Attribute.KEYWORDS: "kMDItemKeywords",
    Attribute.PROJECTS: "kMDItemProjects",
    Attribute.PARTICIPANTS: "kMDItemParticipants",
    Attribute.DUE_DATE: "kMDItemDueDate",
    Attribute.CREATION_DATE: "kMDItemContentCreationDate",
    Attribute.FULL_TEXT: "kMDItemTextContent",
}


def to_spotlight_attributes(record: MetadataRecord) -> Dict[str, Any]:
    """Maps every set canonical attribute to its kMDItem* key"""
    return {SPOTLIGHT_KEYS[attribute]: value for attribute, value in record.attributes().items()}


def read_document(path: Path, encoding: Optional[str] = None) -> Optional[str]:
    """
    Reads and decodes a document.

    :returns: Decoded text, or None if the file can't be read or decoded
    """
    encoding = encoding or get_config_value("importer", "encoding", "NOTEMETA_ENCODING", "utf-8")
    try:
        return path.read_bytes().decode(encoding)
    except UnicodeDecodeError as e:
        log.warning("decode_failed path=%s encoding=%s error=%s", path, encoding, e)
    except OSError as e:
        log.warning("read_failed path=%s error=%s", path, e)
    return None


def get_metadata_for_file(
    path: Path,
    encoding: Optional[str] = None,
    detector: Optional[DateDetector] = None,
) -> Optional[Dict[str, Any]]:
    """
    Spotlight-style attribute dictionary for one file.

    :param path: Markdown file
    :param encoding: Text encoding (default: [importer] encoding, utf-8)
    :param detector: DateDetector passed through to scan()
    :returns: kMDItem* dict, or None if there is no metadata (unreadable file)
    """
    text = read_document(Path(path), encoding)
    if text is None:
        return None
    return to_spotlight_attributes(scan(text, detector))


def import_file(path: Path, encoding: Optional[str] = None, detector: Optional[DateDetector] = None) -> Optional[IndexEntry]:
    """Imports a single file as an IndexEntry (None if unreadable)"""
    path = Path(path)
    text = read_document(path, encoding)
    if text is None:
        return None

    record = scan(text, detector)
    return IndexEntry(
        id=compute_entry_id(str(path)),
        path=str(path),
        content_hash=compute_sha256(text),
        imported=datetime.now(timezone.utc),
        attributes=to_spotlight_attributes(record),
    )


def find_documents(root: Path) -> List[Path]:
    """All markdown files under root, sorted"""
    return sorted(p for p in root.rglob("*") if p.is_file() and p.suffix.lower() in MARKDOWN_SUFFIXES)


def import_directory(notes_dir: Path, encoding: Optional[str] = None, detector: Optional[DateDetector] = None) -> List[IndexEntry]:
    """Imports all markdown files in notes_dir, skipping unreadable ones"""
    entries = []
    for file_path in find_documents(notes_dir):
        entry = import_file(file_path, encoding, detector)
        if entry is not None:
            entries.append(entry)
    log.info("import_done dir=%s imported=%d", notes_dir, len(entries))
    return entries


def _printable(entry: IndexEntry, include_text: bool) -> Dict[str, Any]:
    data = entry.model_dump(mode="json")
    if not include_text:
        data["attributes"].pop(SPOTLIGHT_KEYS[Attribute.FULL_TEXT], None)
    return data


def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(description="Extract Spotlight-style metadata from markdown files")
    parser.add_argument(
        "path",
        help="Path to markdown file or directory"
    )
    parser.add_argument(
        "--records-dir",
        default=None,
        help=f"Also save IndexEntry JSONs here (config default: {get_records_dir()})"
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Save IndexEntry JSONs to the configured records directory"
    )
    parser.add_argument(
        "--no-text",
        action="store_true",
        help="Leave kMDItemTextContent out of the printed output"
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="Text encoding (default: utf-8)"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=str(get_config_value("logging", "level", "NOTEMETA_LOG_LEVEL", "INFO")).upper(),
        format='%(asctime)s %(levelname)s %(name)s %(message)s',
    )

    path = Path(args.path)
    if not path.exists():
        print(f"[import] ERROR: Path does not exist: {path}", file=sys.stderr)
        return 1

    if path.is_file():
        entry = import_file(path, args.encoding)
        entries = [entry] if entry is not None else []
    else:
        entries = import_directory(path, args.encoding)

    records_dir = Path(args.records_dir) if args.records_dir else (get_records_dir() if args.save else None)
    if records_dir is not None:
        for entry in entries:
            out_path = save_entry(entry, records_dir)
            print(f"[import] Saved: {out_path}", file=sys.stderr)

    json.dump([_printable(e, not args.no_text) for e in entries], sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
