from src.application.workflow.access import load_owned_workflow
from src.application.workflow.save_gate import WorkflowSaveGate
from src.domain.workflow.entities.node import parse_nodes
from src.domain.workflow.entities.workflow import Workflow
from src.domain.workflow.value_objects.validation_result import ValidationResult
from src.ports.secondary.workflow_repository import IWorkflowRepository


class UpdateWorkflowUseCase:
    def __init__(self, workflow_repository: IWorkflowRepository, save_gate: WorkflowSaveGate):
        self._workflow_repository = workflow_repository
        self._save_gate = save_gate

    async def execute(
        self,
        workflow_id: str,
        tenant_id: str,
        name: str | None = None,
        description: str | None = None,
        nodes: list | None = None,
        tags: list[str] | None = None,
        confirm_warnings: bool = False,
    ) -> tuple[Workflow, ValidationResult]:
        """
        Applies a partial update to a workflow.

        A new graph passes the save gate before anything is written; fields that
        are not supplied keep their stored values.
        """
        workflow = await load_owned_workflow(self._workflow_repository, workflow_id, tenant_id)

        parsed = None
        result = ValidationResult()
        if nodes is not None:
            parsed = parse_nodes(nodes)
            result = self._save_gate.check(parsed, confirm_warnings)

        workflow.apply_update(name=name, description=description, nodes=parsed, tags=tags)
        await self._workflow_repository.update(workflow)
        return workflow, result
