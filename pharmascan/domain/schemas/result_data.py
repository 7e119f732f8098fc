from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .record import ParsedRecord


class MetaInfo(BaseModel):
    request_id: Optional[str] = None
    timings_ms: Dict[str, int] = Field(default_factory=dict)


class ExtractionResult(BaseModel):
    image_name: str = ""
    records: List[ParsedRecord] = Field(default_factory=list)
    next_record_no: int = 1
    start_lines: int = 0
    dropped_groups: int = 0
    meta: MetaInfo = Field(default_factory=MetaInfo)


class BatchResult(BaseModel):
    results: List[ExtractionResult] = Field(default_factory=list)
    next_record_no: int = 1
    meta: MetaInfo = Field(default_factory=MetaInfo)

    @property
    def records(self) -> List[ParsedRecord]:
        return [rec for res in self.results for rec in res.records]
