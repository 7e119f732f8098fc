from __future__ import annotations

import time
from typing import List, Optional

from pharmascan.domain.ports.Field_extractor_provider import Field_extractor_provider
from pharmascan.domain.ports.Pipeline_interface import Pipeline_interface
from pharmascan.domain.ports.Segmenter_provider import Segmenter_provider
from pharmascan.domain.schemas.input_data import BatchRequest, ExtractionRequest
from pharmascan.domain.schemas.record import ParsedRecord
from pharmascan.domain.schemas.result_data import BatchResult, ExtractionResult, MetaInfo

from pharmascan.lib.logger import get_logger
from .field_extractor_service import FieldExtractorService
from .segmenter_service import SegmenterService


def _elapsed_ms(since: float) -> int:
    return int((time.perf_counter() - since) * 1000)


class PipelineService(Pipeline_interface):
    """Raw OCR text -> line-groups -> records.

    Holds no per-run state: the record counter is passed in with every
    request and handed back as `next_record_no`.
    """

    def __init__(
        self,
        segmenter: Optional[Segmenter_provider] = None,
        extractor: Optional[Field_extractor_provider] = None,
    ) -> None:
        self.logger = get_logger("pipeline")
        self.segmenter = segmenter or SegmenterService()
        self.extractor = extractor or FieldExtractorService()

    def run(self, request: ExtractionRequest, request_id: Optional[str] = None) -> ExtractionResult:
        t0 = time.perf_counter()
        meta = MetaInfo(request_id=request_id, timings_ms={})

        # 1) Segment
        segments = self.segmenter.segment(request.raw_text())
        meta.timings_ms["segment"] = _elapsed_ms(t0)

        # 2) Extract, numbering only the groups that survived segmentation
        t1 = time.perf_counter()
        records: List[ParsedRecord] = []
        for offset, group in enumerate(segments.groups):
            records.append(
                self.extractor.extract(group.text, request.image_name, request.start_record_no + offset)
            )
        meta.timings_ms["extract"] = _elapsed_ms(t1)
        meta.timings_ms["total"] = _elapsed_ms(t0)

        self.logger.info(
            "image=%s: start_lines=%d records=%d dropped=%d (%d ms)",
            request.image_name or "-",
            segments.start_lines,
            len(records),
            segments.dropped,
            meta.timings_ms["total"],
        )
        if not records:
            self.logger.warning("image=%s: no records extracted", request.image_name or "-")

        return ExtractionResult(
            image_name=request.image_name,
            records=records,
            next_record_no=request.start_record_no + len(records),
            start_lines=segments.start_lines,
            dropped_groups=segments.dropped,
            meta=meta,
        )

    def run_batch(self, batch: BatchRequest) -> BatchResult:
        t0 = time.perf_counter()
        request_id = batch.context.request_id
        next_no = batch.start_record_no
        results: List[ExtractionResult] = []

        for doc in batch.documents:
            # Each document continues the numbering where the previous one ended.
            current = doc.model_copy(update={"start_record_no": next_no})
            result = self.run(current, request_id=request_id)
            results.append(result)
            next_no = result.next_record_no

        meta = MetaInfo(request_id=request_id, timings_ms={"total": _elapsed_ms(t0)})
        self.logger.info(
            "batch: documents=%d records=%d next_record_no=%d",
            len(results),
            next_no - batch.start_record_no,
            next_no,
        )
        return BatchResult(results=results, next_record_no=next_no, meta=meta)
