from abc import ABC, abstractmethod


class IMetrics(ABC):
    @abstractmethod
    def record_validation(self, is_valid: bool) -> None:
        pass

    @abstractmethod
    def record_mutation(self, operation: str) -> None:
        pass

    @abstractmethod
    def record_execution_request(self) -> None:
        pass
