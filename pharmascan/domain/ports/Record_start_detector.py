from abc import ABC, abstractmethod


class Record_start_detector(ABC):
    @abstractmethod
    def is_record_start(self, line: str) -> bool:
        """Return True when a trimmed, non-empty OCR line opens a new record."""
        pass
