from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from pharmascan.domain.schemas.input_data import BatchRequest, ExtractionRequest
from pharmascan.lib.settings import EnvSettings
from pharmascan.service.pipeline_service import PipelineService
from pharmascan.service.serializer_service import get_serializer

USAGE = "Usage: python main.py <ocr_text_file> [...]  # or set SERVE=1 to start HTTP server"


def build_request_from_file(path: Path) -> ExtractionRequest:
    text = path.read_text(encoding="utf-8", errors="replace")
    return ExtractionRequest(image_name=path.name, text=text)


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    settings = EnvSettings()

    if settings.get_bool("SERVE") and not args:
        # Run HTTP server; host/port from env
        import uvicorn
        host = settings.get("DOMAIN")
        port = settings.get_int("PORT", 8080)
        uvicorn.run("pharmascan.transport.http.server:app", host=host, port=port, reload=False)
        return 0

    if not args:
        print(USAGE, file=sys.stderr, flush=True)
        return 2

    try:
        serializer = get_serializer(settings.get("OUTPUT_FORMAT"))
    except ValueError as e:
        print(str(e), file=sys.stderr, flush=True)
        return 2

    documents: List[ExtractionRequest] = []
    for arg in args:
        try:
            documents.append(build_request_from_file(Path(arg)))
        except OSError as e:
            print(f"cannot read {arg}: {e}", file=sys.stderr, flush=True)
            return 1

    try:
        batch = BatchRequest(documents=documents, start_record_no=settings.get_int("START_RECORD_NO", 1))
    except ValidationError as e:
        print(f"invalid START_RECORD_NO: {e}", file=sys.stderr, flush=True)
        return 2

    result = PipelineService().run_batch(batch)
    sys.stdout.write(serializer.serialize(result.records))
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
