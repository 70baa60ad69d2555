from src.application.workflow.save_gate import WorkflowSaveGate
from src.domain.workflow.entities.node import parse_nodes
from src.domain.workflow.entities.workflow import Workflow
from src.domain.workflow.value_objects.validation_result import ValidationResult
from src.ports.secondary.workflow_repository import IWorkflowRepository


class CreateWorkflowUseCase:
    """
    Use case for creating a new workflow.

    A workflow without nodes is stored as a draft and skips validation, so the
    console can create it first and open the editor on it afterwards. Any graph
    goes through the save gate. New workflows always start inactive.
    """
    def __init__(self, workflow_repository: IWorkflowRepository, save_gate: WorkflowSaveGate):
        self._workflow_repository = workflow_repository
        self._save_gate = save_gate

    async def execute(
        self,
        tenant_id: str,
        created_by: str,
        name: str,
        description: str | None = None,
        nodes: list | None = None,
        confirm_warnings: bool = False,
    ) -> tuple[Workflow, ValidationResult]:
        parsed = parse_nodes(nodes or [])
        result = ValidationResult()
        if parsed:
            result = self._save_gate.check(parsed, confirm_warnings)

        workflow = Workflow(
            name=name,
            description=description,
            tenant_id=tenant_id,
            created_by=created_by,
            nodes=parsed,
        )
        await self._workflow_repository.save(workflow)
        return workflow, result
