"""
notemeta/lib/dates/detector.py - Natural-Language Date Detection

Finds the first date mentioned in a short piece of text, e.g. the value of a
`date:` frontmatter field.

Recognized forms (case-insensitive):
	2020-03-03, 2020-03-03T10:30, 2020-03-03 10:30:15
	March 3 2020, Mar. 3rd, 2020, March 3      (missing year = current year)
	3 March 2020, 3rd of March, 2020
	3/4/2020, 3/4/20                         (month first unless day_first)
	03.04.2020                               (always day first)
	today, tomorrow, yesterday

Any of them may be followed by a time: "10:30", "at 10:30 pm", "9am".

Usage:
	from notemeta.lib.dates import RegexDateDetector

	detector = RegexDateDetector()
	detector.find_first_date("Meeting on March 3 2020 at 10am")
	# => datetime(2020, 3, 3, 10, 0)

Design Notes:
- DateDetector is a Protocol; any object with find_first_date() can be
  passed to the normalizer instead of the regex implementation
- The match starting earliest in the text wins (longest on ties)
- Impossible dates (February 30, hour 25) are skipped, not raised
- Date-only matches resolve to midnight, naive local time
"""
from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta
from typing import Callable, List, Optional, Protocol, Tuple

from notemeta.lib.config import get_bool

log = logging.getLogger("notemeta.dates")


MONTHS = {
	"jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
	"jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}

_MONTH = (
	r"(?P<month>jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?"
	r"|aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)\b\.?"
)
_ORDINAL = r"(?:st|nd|rd|th)?"
_YEAR = r"(?:,?\s+(?P<year>\d{4})\b)?"
_TIME = (
	r"(?:(?:\s*,)?\s+(?:at\s+)?"
	r"(?P<time>\d{1,2}:\d{2}(?::\d{2})?\b(?:\s*[ap]\.?m\b\.?)?|\d{1,2}\s*[ap]\.?m\b\.?))?"
)
_TIME_PARTS_RE = re.compile(r"(\d{1,2})(?::(\d{2}))?(?::(\d{2}))?\s*(?:([ap])\.?m)?", re.IGNORECASE)

ISO_RE = re.compile(
	r"\b(?P<year>\d{4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})(?!\d)"
	r"(?:T(?P<isotime>\d{1,2}:\d{2}(?::\d{2})?))?" + _TIME,
	re.IGNORECASE,
)
MONTH_DAY_RE = re.compile(r"\b" + _MONTH + r"\s+(?P<day>\d{1,2})" + _ORDINAL + r"\b" + _YEAR + _TIME, re.IGNORECASE)
DAY_MONTH_RE = re.compile(r"\b(?<![:\d])(?P<day>\d{1,2})" + _ORDINAL + r"\s+(?:of\s+)?" + _MONTH + _YEAR + _TIME, re.IGNORECASE)
SLASH_RE = re.compile(r"\b(?<![:\d])(?P<first>\d{1,2})/(?P<second>\d{1,2})/(?P<year>\d{4}|\d{2})\b" + _TIME, re.IGNORECASE)
DOTTED_RE = re.compile(r"\b(?<![:\d])(?P<day>\d{1,2})\.(?P<month>\d{1,2})\.(?P<year>\d{4})\b" + _TIME, re.IGNORECASE)
RELATIVE_RE = re.compile(r"\b(?P<relative>today|tomorrow|yesterday)\b" + _TIME, re.IGNORECASE)
# time written before the date: "10:30 March 3 2020", "9am on 2020-03-03"
LEADING_TIME_RE = re.compile(
	r"(?<![:\d])(?P<time>\d{1,2}:\d{2}(?::\d{2})?(?:\s*[ap]\.?m\.?)?|\d{1,2}\s*[ap]\.?m\.?)\s*,?\s*(?:on\s+)?$",
	re.IGNORECASE,
)

_RELATIVE_DAYS = {"yesterday": -1, "today": 0, "tomorrow": 1}


class DateDetector(Protocol):
	"""Anything that can find the first date in a piece of text."""

	def find_first_date(self, text: str) -> Optional[datetime]:
		...


class RegexDateDetector:
	"""
	Regex-backed DateDetector.

	Args:
		day_first: Read "3/4/2020" as 3 April instead of March 4
		now: Fixed reference time for relative words and missing years
		     (default: datetime.now() at lookup time)
	"""

	def __init__(self, day_first: bool = False, now: datetime | None = None):
		self.day_first = day_first
		self.now = now
		self._patterns: List[Tuple[re.Pattern, Callable[[re.Match, datetime], Tuple[int, int, int]]]] = [
			(ISO_RE, self._ymd_iso),
			(MONTH_DAY_RE, self._ymd_named),
			(DAY_MONTH_RE, self._ymd_named),
			(SLASH_RE, self._ymd_slash),
			(DOTTED_RE, self._ymd_dotted),
			(RELATIVE_RE, self._ymd_relative),
		]

	def find_first_date(self, text: str) -> Optional[datetime]:
		"""
		Return the first date found in `text`, or None.

		Example:
			>>> RegexDateDetector().find_first_date("due 2020-03-03")
			datetime.datetime(2020, 3, 3, 0, 0)
			>>> RegexDateDetector().find_first_date("asdf") is None
			True
		"""
		if not text:
			return None

		now = self.now or datetime.now()
		candidates = []
		for pattern, resolve in self._patterns:
			for match in pattern.finditer(text):
				candidates.append((match.start(), -(match.end() - match.start()), match, resolve))

		candidates.sort(key=lambda c: (c[0], c[1]))
		for _, _, match, resolve in candidates:
			try:
				found = datetime(*resolve(match, now))
			except ValueError:
				continue
			return found.replace(**_time_of(match, text))
		return None

	@staticmethod
	def _ymd_iso(match: re.Match, now: datetime) -> Tuple[int, int, int]:
		return int(match.group("year")), int(match.group("month")), int(match.group("day"))

	@staticmethod
	def _ymd_named(match: re.Match, now: datetime) -> Tuple[int, int, int]:
		month = MONTHS[match.group("month")[:3].lower()]
		year = int(match.group("year")) if match.group("year") else now.year
		return year, month, int(match.group("day"))

	def _ymd_slash(self, match: re.Match, now: datetime) -> Tuple[int, int, int]:
		first, second = int(match.group("first")), int(match.group("second"))
		day, month = (first, second) if self.day_first else (second, first)
		return _full_year(match.group("year")), month, day

	@staticmethod
	def _ymd_dotted(match: re.Match, now: datetime) -> Tuple[int, int, int]:
		return int(match.group("year")), int(match.group("month")), int(match.group("day"))

	@staticmethod
	def _ymd_relative(match: re.Match, now: datetime) -> Tuple[int, int, int]:
		day = now + timedelta(days=_RELATIVE_DAYS[match.group("relative").lower()])
		return day.year, day.month, day.day


def _full_year(text: str) -> int:
	year = int(text)
	return year + 2000 if len(text) == 2 else year


def _time_of(match: re.Match, text: str) -> dict:
	"""
	Time for a date match: trailing time first, then a time written just
	before the date. An impossible time leaves the date at midnight.
	"""
	time = match.groupdict().get("isotime") or match.group("time")
	if not time:
		leading = LEADING_TIME_RE.search(text, 0, match.start())
		time = leading.group("time") if leading else None
	try:
		hour, minute, second = _parse_time(time)
		return {"hour": hour, "minute": minute, "second": second}
	except ValueError:
		return {}


def _parse_time(text: str | None) -> Tuple[int, int, int]:
	"""
	Parse "10:30", "10:30:15", "9 pm", "12:05 a.m." into (h, m, s).

	Raises:
		ValueError: If the hour does not fit the clock
	"""
	if not text:
		return 0, 0, 0

	m = _TIME_PARTS_RE.match(text)
	hour = int(m.group(1))
	minute = int(m.group(2) or 0)
	second = int(m.group(3) or 0)
	meridiem = (m.group(4) or "").lower()

	if meridiem:
		if not 1 <= hour <= 12:
			raise ValueError(f"Invalid 12-hour clock value: {text!r}")
		hour = hour % 12 + (12 if meridiem == "p" else 0)
	if hour > 23 or minute > 59 or second > 59:
		raise ValueError(f"Invalid time: {text!r}")
	return hour, minute, second


def default_detector() -> RegexDateDetector:
	"""
	RegexDateDetector configured from [dates] day_first / NOTEMETA_DAY_FIRST.

	An unreadable setting is logged and treated as month-first.
	"""
	try:
		day_first = get_bool("dates", "day_first", "NOTEMETA_DAY_FIRST", False)
	except ValueError as e:
		log.warning("config_invalid setting=day_first error=%s", e)
		day_first = False
	return RegexDateDetector(day_first=day_first)
