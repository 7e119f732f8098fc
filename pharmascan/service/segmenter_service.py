from __future__ import annotations

import re
from typing import List, Optional

from pharmascan.domain.ports.Record_start_detector import Record_start_detector
from pharmascan.domain.ports.Segmenter_provider import Segmenter_provider
from pharmascan.domain.schemas.segment_data import LineGroup, SegmentResult
from pharmascan.lib.logger import get_logger

from .normalizer_service import normalize_text

# Groups shorter than this after normalization are OCR noise.
MIN_RECORD_CHARS = 20


class AnchorStartDetector(Record_start_detector):
    """A record starts on a line that opens with a 5-digit ID and carries an email."""

    ID_PREFIX_RE = re.compile(r"^\d{5}\b")
    EMAIL_RE = re.compile(r"[\w.-]+@[\w.-]+\.\w+")

    def is_record_start(self, line: str) -> bool:
        m = self.ID_PREFIX_RE.match(line)
        if m is None:
            return False
        return self.EMAIL_RE.search(line, m.end()) is not None


class SegmenterService(Segmenter_provider):
    """Line-by-line state machine that cuts OCR text at record-start lines.

    Lines seen before the first start line have no reliable owner and are
    dropped. Blank lines neither join nor close a group.
    """

    def __init__(
        self,
        detector: Optional[Record_start_detector] = None,
        min_chars: int = MIN_RECORD_CHARS,
    ) -> None:
        self.logger = get_logger("segment")
        self.detector = detector or AnchorStartDetector()
        self.min_chars = min_chars

    def segment(self, raw_text: str) -> SegmentResult:
        result = SegmentResult()
        buffer: Optional[List[str]] = None
        skipped = 0

        # Only line endings split; other control characters stay inside the line.
        lines = (raw_text or "").replace("\r\n", "\n").replace("\r", "\n").split("\n")
        for line in lines:
            stripped = line.strip()
            if not stripped:
                continue
            if self.detector.is_record_start(stripped):
                result.start_lines += 1
                if buffer:
                    self._finalize(buffer, result)
                buffer = [stripped]
            elif buffer is None:
                skipped += 1
            else:
                buffer.append(stripped)

        if buffer:
            self._finalize(buffer, result)

        if skipped:
            self.logger.debug("segment: skipped %d line(s) before first record", skipped)
        self.logger.debug(
            "segment: start_lines=%d groups=%d dropped=%d",
            result.start_lines,
            len(result.groups),
            result.dropped,
        )
        return result

    def _finalize(self, buffer: List[str], result: SegmentResult) -> None:
        text = normalize_text("\n".join(buffer))
        if len(text) < self.min_chars:
            result.dropped += 1
            self.logger.debug("segment: dropped short group (%d chars)", len(text))
            return
        result.groups.append(LineGroup(lines=list(buffer), text=text))
