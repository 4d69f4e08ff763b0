# src/metadata/models.py
# Responsibility: Value objects returned by metadata accessors.

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Image(BaseModel):
    """
    Externally visible description of an image declared by the page.
    """
    model_config = ConfigDict(frozen=True)

    url: str = ""
    secure_url: str = ""
    type: str = ""
    caption: str = ""
    width: Optional[int] = None
    height: Optional[int] = None


class Article(BaseModel):
    """
    Aggregate article description (dates, section, authors).
    """
    model_config = ConfigDict(frozen=True)

    published_time: str = ""
    modified_time: str = ""
    expiration_time: str = ""
    section: str = ""
    authors: List[str] = Field(default_factory=list)
