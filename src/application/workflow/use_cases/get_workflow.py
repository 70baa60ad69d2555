from src.application.workflow.access import load_owned_workflow
from src.domain.workflow.entities.workflow import Workflow
from src.ports.secondary.workflow_repository import IWorkflowRepository


class GetWorkflowUseCase:
    def __init__(self, workflow_repository: IWorkflowRepository):
        self._workflow_repository = workflow_repository

    async def execute(self, workflow_id: str, tenant_id: str) -> Workflow:
        return await load_owned_workflow(self._workflow_repository, workflow_id, tenant_id)


class ListWorkflowsUseCase:
    def __init__(self, workflow_repository: IWorkflowRepository):
        self._workflow_repository = workflow_repository

    async def execute(self, tenant_id: str) -> list[Workflow]:
        return await self._workflow_repository.list_by_tenant(tenant_id)
