from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from pharmascan.domain.schemas.input_data import BatchRequest, ExtractionRequest
from pharmascan.domain.schemas.result_data import BatchResult, ExtractionResult
from pharmascan.lib.logger import get_logger
from pharmascan.service.pipeline_service import PipelineService

from .deps import get_pipeline


router = APIRouter()


@router.post("/records", summary="Extract records from the OCR text of one image", response_model=ExtractionResult)
def extract_records(
    body: ExtractionRequest,
    pipeline: PipelineService = Depends(get_pipeline),
) -> ExtractionResult:
    try:
        return pipeline.run(body)
    except Exception as e:
        get_logger("http").exception("extraction failed for image=%s", body.image_name)
        # Keep message short for client; details are in server logs
        raise HTTPException(status_code=500, detail=f"processing failed: {e}") from e


@router.post("/records/batch", summary="Extract records from several images in one run", response_model=BatchResult)
def extract_batch(
    body: BatchRequest,
    pipeline: PipelineService = Depends(get_pipeline),
) -> BatchResult:
    try:
        return pipeline.run_batch(body)
    except Exception as e:
        get_logger("http").exception("batch extraction failed (%d documents)", len(body.documents))
        raise HTTPException(status_code=500, detail=f"processing failed: {e}") from e
