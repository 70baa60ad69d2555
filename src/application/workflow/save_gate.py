from src.domain.workflow.entities.node import WorkflowNode
from src.domain.workflow.exceptions import (
    UnconfirmedWarningsError,
    WorkflowTooLargeError,
    WorkflowValidationError,
)
from src.domain.workflow.services.workflow_validator import WorkflowValidator
from src.domain.workflow.value_objects.validation_result import ValidationResult
from src.ports.secondary.metrics import IMetrics
from src.shared.logger import get_logger

logger = get_logger(__name__)


class WorkflowSaveGate:
    """
    Runs validation before a graph may be written or activated.

    Errors always block. Warnings block unless the caller confirmed them, which
    mirrors the editor asking the user before saving a graph with warnings.
    """

    def __init__(
        self,
        validator: WorkflowValidator | None = None,
        metrics: IMetrics | None = None,
        max_nodes: int | None = None,
    ):
        self._validator = validator or WorkflowValidator()
        self._metrics = metrics
        self._max_nodes = max_nodes

    def ensure_size(self, node_count: int) -> None:
        if self._max_nodes is not None and node_count > self._max_nodes:
            raise WorkflowTooLargeError(node_count, self._max_nodes)

    def validate(self, nodes: list[WorkflowNode]) -> ValidationResult:
        self.ensure_size(len(nodes))
        result = self._validator.validate(nodes)
        if self._metrics:
            self._metrics.record_validation(result.is_valid)
        return result

    def check(self, nodes: list[WorkflowNode], confirm_warnings: bool = False) -> ValidationResult:
        result = self.validate(nodes)

        if not result.is_valid:
            logger.info(
                "workflow_validation_failed",
                errors=len(result.errors),
                warnings=len(result.warnings),
            )
            raise WorkflowValidationError(result)

        if result.warnings and not confirm_warnings:
            logger.info("workflow_warnings_unconfirmed", warnings=len(result.warnings))
            raise UnconfirmedWarningsError(result)

        return result
