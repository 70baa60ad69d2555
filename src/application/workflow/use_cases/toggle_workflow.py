from src.application.workflow.access import load_owned_workflow
from src.application.workflow.save_gate import WorkflowSaveGate
from src.domain.workflow.entities.workflow import Workflow
from src.domain.workflow.value_objects.validation_result import ValidationResult
from src.ports.secondary.workflow_repository import IWorkflowRepository


class ToggleWorkflowUseCase:
    def __init__(self, workflow_repository: IWorkflowRepository, save_gate: WorkflowSaveGate):
        self._workflow_repository = workflow_repository
        self._save_gate = save_gate

    async def execute(
        self,
        workflow_id: str,
        tenant_id: str,
        is_active: bool,
        confirm_warnings: bool = False,
    ) -> tuple[Workflow, ValidationResult]:
        """
        Activates or pauses a workflow.

        Activation re-validates the stored graph, so a draft or a graph saved
        before a rule change cannot go live. Pausing never validates.
        """
        workflow = await load_owned_workflow(self._workflow_repository, workflow_id, tenant_id)

        result = ValidationResult()
        if is_active:
            result = self._save_gate.check(workflow.nodes, confirm_warnings)

        workflow.set_active(is_active)
        await self._workflow_repository.update(workflow)
        return workflow, result
