"""
notemeta/lib/frontmatter/normalize.py - RawField → Canonical Attributes

Supported Fields (key matched case-insensitively):
- title                  → title, subject, display-name (first value)
- keywords, tags         → keywords (split on ',', flattened)
- project, projects      → projects (values as-is)
- attendees, participants → participants (values as-is)
- date                   → due-date, creation-date (first date found)

Unknown keys produce nothing. A recognized key without values produces
nothing. A date value without a recognizable date produces nothing.

Usage:
	from notemeta.lib.frontmatter import normalize
	from notemeta.models import RawField

	normalize(RawField(key="Tags", values=["a, b", "c"]))
	# => {Attribute.KEYWORDS: ["a", "b", "c"]}
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Tuple

from notemeta.lib.dates import DateDetector, default_detector
from notemeta.models import Attribute, AttributeValue, RawField

log = logging.getLogger("notemeta.normalize")

Attributes = Dict[Attribute, AttributeValue]


def _first(values: List[str], detector: DateDetector | None) -> Optional[AttributeValue]:
	return values[0]


def _flatten_commas(values: List[str], detector: DateDetector | None) -> Optional[AttributeValue]:
	pieces = [piece.strip() for value in values for piece in value.split(",")]
	return [piece for piece in pieces if piece]


def _as_list(values: List[str], detector: DateDetector | None) -> Optional[AttributeValue]:
	return list(values)


def _first_date(values: List[str], detector: DateDetector | None) -> Optional[AttributeValue]:
	found = (detector or default_detector()).find_first_date(values[0])
	if found is None:
		log.debug("date_no_match value=%r", values[0])
	return found


Rule = Tuple[Tuple[Attribute, ...], Callable[[List[str], Optional[DateDetector]], Optional[AttributeValue]]]

TITLE_ATTRIBUTES = (Attribute.TITLE, Attribute.SUBJECT, Attribute.DISPLAY_NAME)

RULES: Dict[str, Rule] = {
	"title": (TITLE_ATTRIBUTES, _first),
	"keywords": ((Attribute.KEYWORDS,), _flatten_commas),
	"tags": ((Attribute.KEYWORDS,), _flatten_commas),
	"project": ((Attribute.PROJECTS,), _as_list),
	"projects": ((Attribute.PROJECTS,), _as_list),
	"attendees": ((Attribute.PARTICIPANTS,), _as_list),
	"participants": ((Attribute.PARTICIPANTS,), _as_list),
	"date": ((Attribute.DUE_DATE, Attribute.CREATION_DATE), _first_date),
}


def normalize_values(key: str, values: List[str], detector: DateDetector | None = None) -> Attributes:
	"""
	Map a key and its values to canonical attributes.

	Args:
		key: Frontmatter key (any case)
		values: Values collected for the key (may be empty)
		detector: DateDetector for 'date' (default: configured RegexDateDetector)

	Returns:
		Dict[Attribute, value]: Empty for unknown keys, empty value lists
		and dates that could not be recognized.
	"""
	rule = RULES.get(key.lower())
	if rule is None:
		log.debug("field_ignored key=%s", key)
		return {}
	if not values:
		log.debug("field_empty key=%s", key)
		return {}

	attributes, transform = rule
	value = transform(values, detector)
	if value is None:
		return {}
	return {attribute: value for attribute in attributes}


def normalize(field: RawField, detector: DateDetector | None = None) -> Attributes:
	"""Map one RawField to canonical attributes (see normalize_values)."""
	return normalize_values(field.key, field.values, detector)
