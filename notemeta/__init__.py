"""
notemeta - Metadata extraction for markdown notes

Reads the leading frontmatter block (or the first heading) of a note and
returns a MetadataRecord of canonical attributes.
"""

from notemeta.lib.frontmatter import scan
from notemeta.models import Attribute, MetadataRecord, RawField

__version__ = "0.1.0"

__all__ = [
    "scan",
    "Attribute",
    "MetadataRecord",
    "RawField",
]
