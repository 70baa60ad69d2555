from src.domain.workflow.entities.workflow import Workflow
from src.domain.workflow.exceptions import WorkflowAccessDeniedError, WorkflowNotFoundError
from src.ports.secondary.workflow_repository import IWorkflowRepository


async def load_owned_workflow(
    repository: IWorkflowRepository, workflow_id: str, tenant_id: str
) -> Workflow:
    """Loads a workflow and checks that it belongs to the calling tenant."""
    workflow = await repository.get_by_id(workflow_id)
    if not workflow:
        raise WorkflowNotFoundError(workflow_id)
    if not workflow.belongs_to(tenant_id):
        raise WorkflowAccessDeniedError(workflow_id, tenant_id)
    return workflow
