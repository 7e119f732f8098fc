from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from pharmascan.domain.schemas.input_data import BatchRequest
from pharmascan.lib.logger import get_logger
from pharmascan.service.pipeline_service import PipelineService
from pharmascan.service.serializer_service import get_serializer

from .deps import get_pipeline


router = APIRouter()


@router.post("/export/{fmt}", summary="Extract records and return them as a CSV or XML file")
def export_records(
    fmt: str,
    body: BatchRequest,
    pipeline: PipelineService = Depends(get_pipeline),
) -> Response:
    try:
        serializer = get_serializer(fmt)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

    try:
        batch = pipeline.run_batch(body)
        content = serializer.serialize(batch.records)
    except Exception as e:
        get_logger("http").exception("export to %s failed", fmt)
        raise HTTPException(status_code=500, detail=f"export failed: {e}") from e

    headers = {"Content-Disposition": f'attachment; filename="{serializer.filename}"'}
    return Response(content=content, media_type=serializer.media_type, headers=headers)
