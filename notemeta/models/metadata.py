"""MetadataRecord model - Canonical attributes extracted from one document"""

from __future__ import annotations

from enum import Enum
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


AttributeValue = Union[str, List[str], datetime]


class Attribute(str, Enum):
    """Canonical attribute names"""

    TITLE = "title"
    SUBJECT = "subject"
    DISPLAY_NAME = "display-name"
    KEYWORDS = "keywords"
    PROJECTS = "projects"
    PARTICIPANTS = "participants"
    DUE_DATE = "due-date"
    CREATION_DATE = "creation-date"
    FULL_TEXT = "full-text"

    @property
    def field_name(self) -> str:
        return self.value.replace("-", "_")


class MetadataRecord(BaseModel):
    """
    Metadata extracted from one document scan.

    Every canonical attribute is optional; unset attributes stay None.
    Writing an attribute twice keeps the last value.
    """

    title: Optional[str] = Field(None, description="Document title")
    subject: Optional[str] = Field(None, description="Subject (mirrors title)")
    display_name: Optional[str] = Field(None, description="Display name (mirrors title)")
    keywords: Optional[List[str]] = Field(None, description="Flattened keywords/tags")
    projects: Optional[List[str]] = Field(None, description="Projects, as written")
    participants: Optional[List[str]] = Field(None, description="Attendees/participants, as written")
    due_date: Optional[datetime] = Field(None, description="First date found in 'date'")
    creation_date: Optional[datetime] = Field(None, description="First date found in 'date'")
    full_text: Optional[str] = Field(None, description="Entire document text, unmodified")

    class Config:
        extra = "forbid"

    def set(self, attribute: Attribute, value: AttributeValue) -> None:
        setattr(self, attribute.field_name, value)

    def get(self, attribute: Attribute) -> Optional[AttributeValue]:
        return getattr(self, attribute.field_name)

    def update(self, attributes: Dict[Attribute, AttributeValue]) -> None:
        """Write every attribute of `attributes`, overwriting earlier values"""
        for attribute, value in attributes.items():
            self.set(attribute, value)

    def attributes(self) -> Dict[Attribute, Any]:
        """Set attributes only, in canonical order"""
        return {a: self.get(a) for a in Attribute if self.get(a) is not None}
