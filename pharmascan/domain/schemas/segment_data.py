from typing import List

from pydantic import BaseModel, Field


class LineGroup(BaseModel):
    """Contiguous OCR lines believed to form one record."""

    lines: List[str] = Field(default_factory=list)
    text: str = ""  # normalized join of `lines`


class SegmentResult(BaseModel):
    groups: List[LineGroup] = Field(default_factory=list)
    start_lines: int = 0
    dropped: int = 0
