from abc import ABC, abstractmethod

from pharmascan.domain.schemas.input_data import BatchRequest, ExtractionRequest
from pharmascan.domain.schemas.result_data import BatchResult, ExtractionResult


class Pipeline_interface(ABC):
    @abstractmethod
    def run(self, request: ExtractionRequest) -> ExtractionResult:
        pass

    @abstractmethod
    def run_batch(self, batch: BatchRequest) -> BatchResult:
        pass
