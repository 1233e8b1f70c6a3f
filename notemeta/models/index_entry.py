"""IndexEntry model - Imported document as handed to the search index"""

from pydantic import BaseModel, Field, field_validator
from typing import Dict, List, Union
from datetime import datetime

AttributeJSON = Union[datetime, List[str], str]

# kMDItem* keys holding dates; stored as ISO 8601 strings in JSON
DATE_KEYS = ("kMDItemDueDate", "kMDItemContentCreationDate")


class IndexEntry(BaseModel):
    """Imported document: source path, hashes and external attributes"""

    id: str = Field(
        ...,
        pattern=r"^[a-f0-9]{12}$",
        description="Entry id derived from the source path"
    )

    path: str = Field(
        ...,
        min_length=1,
        description="Path of the imported file"
    )

    content_hash: str = Field(
        ...,
        pattern=r"^sha256:[a-f0-9]{64}$",
        description="SHA256 of the decoded document text"
    )

    imported: datetime = Field(
        ...,
        description="ISO 8601 timestamp of the import"
    )

    attributes: Dict[str, AttributeJSON] = Field(
        default_factory=dict,
        description="Spotlight-style attribute dictionary (kMDItem* keys)"
    )

    @field_validator("attributes")
    @classmethod
    def restore_dates(cls, attributes: Dict[str, AttributeJSON]) -> Dict[str, AttributeJSON]:
        """Date keys loaded from JSON come back as datetimes"""
        for key in DATE_KEYS:
            if isinstance(attributes.get(key), str):
                attributes[key] = datetime.fromisoformat(attributes[key])
        return attributes

    class Config:
        extra = "forbid"
        json_schema_extra = {
            "examples": [
                {
                    "id": "a3f2bc1d9e8f",
                    "path": "notes/weekly-sync.md",
                    "content_hash": "sha256:" + "0" * 64,
                    "imported": "2020-03-03T10:30:00+00:00",
                    "attributes": {
                        "kMDItemTitle": "Weekly Sync",
                        "kMDItemKeywords": ["work", "meeting"]
                    }
                }
            ]
        }
