from abc import ABC, abstractmethod
from typing import Sequence

from pharmascan.domain.schemas.record import ParsedRecord


class Serializer_provider(ABC):
    media_type: str = "text/plain"
    filename: str = "medical_records.txt"

    @abstractmethod
    def serialize(self, records: Sequence[ParsedRecord]) -> str:
        pass
