"""Date detection for frontmatter date fields"""

from .detector import DateDetector, RegexDateDetector, default_detector

__all__ = [
	"DateDetector",
	"RegexDateDetector",
	"default_detector",
]
