from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from src.domain.workflow.value_objects.validation_result import ValidationResult


class WorkflowException(Exception):
    def __init__(
        self,
        message: str,
        error_code: str = "WORKFLOW_ERROR",
        context: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        super().__init__(self.message)

class InvalidNodeError(WorkflowException):
    def __init__(self, node_id: str, details: str):
        self.node_id = node_id
        super().__init__(
            message=f"Invalid node '{node_id}': {details}",
            error_code="INVALID_NODE",
            context={"node_id": node_id, "details": details}
        )

class InvalidWorkflowError(WorkflowException):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code="INVALID_WORKFLOW",
            context=details
        )

class WorkflowTooLargeError(WorkflowException):
    def __init__(self, node_count: int, max_nodes: int):
        super().__init__(
            message=f"Workflow has {node_count} nodes, the maximum is {max_nodes}",
            error_code="WORKFLOW_TOO_LARGE",
            context={"node_count": node_count, "max_nodes": max_nodes}
        )

class WorkflowNotFoundError(WorkflowException):
    def __init__(self, workflow_id: str):
        self.workflow_id = workflow_id
        super().__init__(
            message=f"Workflow '{workflow_id}' not found",
            error_code="WORKFLOW_NOT_FOUND",
            context={"workflow_id": workflow_id}
        )

class WorkflowAccessDeniedError(WorkflowException):
    def __init__(self, workflow_id: str, tenant_id: str):
        super().__init__(
            message=f"Workflow '{workflow_id}' does not belong to tenant '{tenant_id}'",
            error_code="WORKFLOW_ACCESS_DENIED",
            context={"workflow_id": workflow_id, "tenant_id": tenant_id}
        )

class TemplateNotFoundError(WorkflowException):
    def __init__(self, template_id: str):
        self.template_id = template_id
        super().__init__(
            message=f"Template '{template_id}' not found",
            error_code="TEMPLATE_NOT_FOUND",
            context={"template_id": template_id}
        )

class InactiveWorkflowError(WorkflowException):
    def __init__(self, workflow_id: str):
        super().__init__(
            message=f"Workflow '{workflow_id}' is not active",
            error_code="WORKFLOW_INACTIVE",
            context={"workflow_id": workflow_id}
        )

class WorkflowValidationError(WorkflowException):
    """Raised by the save gate when the graph has blocking errors."""

    def __init__(self, result: "ValidationResult"):
        self.result = result
        super().__init__(
            message="Workflow validation failed",
            error_code="WORKFLOW_VALIDATION_FAILED",
            context={"errors": list(result.errors), "warnings": list(result.warnings)}
        )

class UnconfirmedWarningsError(WorkflowException):
    """Raised by the save gate when warnings were not explicitly confirmed."""

    def __init__(self, result: "ValidationResult"):
        self.result = result
        super().__init__(
            message="Workflow has warnings that must be confirmed",
            error_code="WARNINGS_NOT_CONFIRMED",
            context={"warnings": list(result.warnings)}
        )
