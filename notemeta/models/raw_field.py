"""RawField model - (key, values) pair taken straight from frontmatter lines"""

from pydantic import BaseModel, Field
from typing import List


class RawField(BaseModel):
    """Frontmatter key with the values collected for it (before interpretation)"""

    key: str = Field(
        ...,
        min_length=1,
        description="Key as captured (case preserved, trimmed of whitespace, '-' and ':')",
        examples=["title", "Tags", "attendees"]
    )

    values: List[str] = Field(
        ...,
        min_length=1,
        description="Non-empty values in line order"
    )

    class Config:
        extra = "forbid"
        json_schema_extra = {
            "examples": [
                {
                    "key": "tags",
                    "values": ["work, meeting"]
                }
            ]
        }
