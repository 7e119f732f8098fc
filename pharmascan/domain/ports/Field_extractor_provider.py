from abc import ABC, abstractmethod

from pharmascan.domain.schemas.record import ParsedRecord


class Field_extractor_provider(ABC):
    @abstractmethod
    def extract(self, text: str, image_name: str, record_no: int) -> ParsedRecord:
        """Fill a record from one line-group's text.

        Implementations must not raise on any string input: fields without a
        qualifying match are left empty.
        """
        pass
