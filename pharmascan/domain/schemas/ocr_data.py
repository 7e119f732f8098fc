from typing import List, Optional

from pydantic import BaseModel, Field


class OCRLine(BaseModel):
    text: str
    conf: Optional[float] = Field(default=None, ge=0.0, le=1.0)


class OCRData(BaseModel):
    """Line-level output of an external OCR provider, in reading order."""

    lines: List[OCRLine] = Field(default_factory=list)

    def raw_text(self) -> str:
        return "\n".join(line.text for line in self.lines)
