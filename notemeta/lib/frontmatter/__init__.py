"""Frontmatter metadata extraction"""

from .tokenizer import tokenize
from .normalize import normalize, normalize_values
from .scanner import find_frontmatter, find_heading, scan

__all__ = [
	"tokenize",
	"normalize",
	"normalize_values",
	"find_frontmatter",
	"find_heading",
	"scan",
]
