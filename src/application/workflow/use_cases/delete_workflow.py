from src.application.workflow.access import load_owned_workflow
from src.ports.secondary.workflow_repository import IWorkflowRepository


class DeleteWorkflowUseCase:
    def __init__(self, workflow_repository: IWorkflowRepository):
        self._workflow_repository = workflow_repository

    async def execute(self, workflow_id: str, tenant_id: str) -> None:
        await load_owned_workflow(self._workflow_repository, workflow_id, tenant_id)
        await self._workflow_repository.delete(workflow_id)
