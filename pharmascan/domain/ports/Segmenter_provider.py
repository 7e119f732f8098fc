from abc import ABC, abstractmethod

from pharmascan.domain.schemas.segment_data import SegmentResult


class Segmenter_provider(ABC):
    @abstractmethod
    def segment(self, raw_text: str) -> SegmentResult:
        """Partition raw OCR text into line-groups, one per hypothesized record."""
        pass
