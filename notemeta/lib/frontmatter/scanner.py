"""
notemeta/lib/frontmatter/scanner.py - Document → MetadataRecord

Entry point of the metadata extraction:

	---                      ← first line must be exactly '---'
	title: Weekly Sync       ┐
	tags: work, meeting      │ frontmatter block → tokenize() → normalize()
	date: March 3 2020       ┘
	---                      ← next '---' anywhere in the text
	# Ignored Heading        ← only used when no title was found above
	body text

Steps:
1. Frontmatter: tokenize + normalize each field (later writes win).
   Without a closing '---' nothing is consumed.
2. Heading fallback: if no title yet, the first "# " after the frontmatter
   (or from the document start) gives the title, subject and display name.
3. full-text is always the unmodified input.

Usage:
	from notemeta.lib.frontmatter import scan

	record = scan(open("notes/sync.md", encoding="utf-8").read())
	record.title      # => "Weekly Sync"
	record.keywords   # => ["work", "meeting"]
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from notemeta.lib.dates import DateDetector
from notemeta.models import Attribute, MetadataRecord

from .normalize import normalize, normalize_values
from .tokenizer import tokenize

log = logging.getLogger("notemeta.scanner")

DELIMITER = "---"
HEADING_MARK = "# "


def find_frontmatter(text: str) -> Optional[Tuple[int, int]]:
	"""
	Locate the frontmatter block.

	Returns:
		(start, end) offsets of the text strictly between the opening
		'---' line and the next '---', or None if the first line is not
		'---' or no closing '---' follows.

	Example:
		>>> find_frontmatter("---\\ntitle: A\\n---\\nbody")
		(4, 13)
		>>> find_frontmatter("---\\ntitle: A\\n") is None
		True
	"""
	first_line, newline, _ = text.partition("\n")
	if not newline or first_line.rstrip("\r") != DELIMITER:
		return None

	start = len(first_line) + 1
	end = text.find(DELIMITER, start)
	if end == -1:
		return None
	return start, end


def find_heading(text: str, start: int = 0) -> Optional[str]:
	"""
	Text after the first "# " at or after `start`, up to the end of its line.

	Returns None when there is no "# ". A bare "# " line is skipped on purpose:
	an empty title would blank out title, subject and display name.
	"""
	idx = text.find(HEADING_MARK, start)
	if idx == -1:
		return None

	line_start = idx + len(HEADING_MARK)
	line_end = text.find("\n", line_start)
	heading = text[line_start:] if line_end == -1 else text[line_start:line_end]
	return heading.strip() or None


def scan(document_text: str, detector: DateDetector | None = None) -> MetadataRecord:
	"""
	Extract a MetadataRecord from a whole document.

	Args:
		document_text: Decoded document text
		detector: DateDetector for 'date' fields (default: configured RegexDateDetector)

	Returns:
		MetadataRecord: Always contains full-text; everything else only
		when found. Never raises for malformed frontmatter.
	"""
	record = MetadataRecord()
	position = 0

	span = find_frontmatter(document_text)
	if span is not None:
		start, end = span
		for field in tokenize(document_text[start:end]):
			record.update(normalize(field, detector))
		position = end + len(DELIMITER)

	if record.title is None:
		heading = find_heading(document_text, position)
		if heading is not None:
			record.update(normalize_values("title", [heading], detector))

	record.set(Attribute.FULL_TEXT, document_text)
	log.debug("scan_done attributes=%d", len(record.attributes()))
	return record
