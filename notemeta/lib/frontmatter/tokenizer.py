"""
notemeta/lib/frontmatter/tokenizer.py - Line-Oriented Frontmatter Tokenizer

Splits the text between the `---` delimiters into (key, values) pairs.
This is deliberately not a YAML parser: only "key: value" lines and
"- item" list lines are understood.

Frontmatter Format:
	title: Weekly Sync
	tags: work, meeting
	attendees:
	  - Alice
	  - Bob

Tokenized:
	[RawField(key="title", values=["Weekly Sync"]),
	 RawField(key="tags", values=["work, meeting"]),
	 RawField(key="attendees", values=["Alice", "Bob"])]

Rules (per line):
- The first ':' or '-' in the line decides what it is
- ':' opens a new key (text before it); the previous key is flushed
- '-' is a list item for the current key
- The rest of the line from that character on, trimmed of whitespace,
  '-' and ':', is a value if non-empty
- A non-blank line with neither character stops tokenization; fields
  flushed so far are returned, the pending key is dropped

Usage:
	from notemeta.lib.frontmatter import tokenize

	fields = tokenize("title: Pizza\\ntags: cooking, italian\\n")
"""
from __future__ import annotations

import logging
import re
from typing import List

from notemeta.models import RawField

log = logging.getLogger("notemeta.tokenizer")

DELIMITER_RE = re.compile(r"[:\-]")
TRIM_RE = re.compile(r"^[\s:\-]+|[\s:\-]+$")


def trim(text: str) -> str:
	"""Strip whitespace, '-' and ':' from both ends."""
	return TRIM_RE.sub("", text)


def tokenize(text: str) -> List[RawField]:
	"""
	Tokenize a frontmatter block into RawFields.

	Args:
		text: Frontmatter block (without the `---` delimiters)

	Returns:
		List[RawField]: Fields in order of appearance. Keys without any
		value are dropped. Repeated keys are kept (no deduplication).

	Example:
		>>> [f.key for f in tokenize("title: A\\ntags:\\n- x\\n- y")]
		['title', 'tags']
		>>> tokenize("title: A\\nnot a field\\ntags: x")
		[RawField(key='title', values=['A'])]
	"""
	fields: List[RawField] = []
	key: str | None = None
	values: List[str] = []

	for lineno, line in enumerate(text.splitlines(), start=1):
		if not line.strip():
			continue

		m = DELIMITER_RE.search(line)
		if m is None:
			log.debug("frontmatter_stop line=%d text=%r", lineno, line)
			return fields

		if m.group() == ":":
			_flush(fields, key, values)
			key = trim(line[:m.start()])
			values = []

		value = trim(line[m.start():])
		if value:
			values.append(value)

	_flush(fields, key, values)
	return fields


def _flush(fields: List[RawField], key: str | None, values: List[str]) -> None:
	if not key:
		if values:
			log.debug("frontmatter_orphan_values count=%d", len(values))
		return
	if not values:
		log.debug("frontmatter_empty_key key=%s", key)
		return
	fields.append(RawField(key=key, values=list(values)))
