from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from .ocr_data import OCRData, OCRLine


class ExtractionRequest(BaseModel):
    """OCR text of a single image plus the numbering context for its records."""

    image_name: str = ""
    text: Optional[str] = None
    lines: Optional[List[OCRLine]] = None
    start_record_no: int = Field(default=1, ge=0)

    @model_validator(mode="after")
    def validate_source(self) -> "ExtractionRequest":
        # Either a text blob or OCR lines must be present, even if empty.
        if self.text is None and self.lines is None:
            raise ValueError("extraction request requires either text or lines")
        return self

    def raw_text(self) -> str:
        if self.text is not None:
            return self.text
        return OCRData(lines=self.lines or []).raw_text()


class RequestContext(BaseModel):
    """Request-scoped metadata propagated through the pipeline."""

    request_id: Optional[str] = None
    extra: Dict[str, Any] = Field(default_factory=dict)


class BatchRequest(BaseModel):
    """Several images processed as one run; numbering continues across them."""

    documents: List[ExtractionRequest] = Field(default_factory=list)
    start_record_no: int = Field(default=1, ge=0)
    context: RequestContext = Field(default_factory=RequestContext)
