"""
notemeta Pydantic Models
"""

from .raw_field import RawField
from .metadata import Attribute, AttributeValue, MetadataRecord
from .index_entry import IndexEntry

__all__ = [
    "RawField",
    "Attribute",
    "AttributeValue",
    "MetadataRecord",
    "IndexEntry",
]
