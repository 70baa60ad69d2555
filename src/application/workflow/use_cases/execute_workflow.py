from src.application.workflow.access import load_owned_workflow
from src.domain.workflow.entities.execution import WorkflowExecution
from src.domain.workflow.exceptions import InactiveWorkflowError
from src.ports.secondary.execution_repository import IExecutionRepository
from src.ports.secondary.message_broker import ExecutionRequestMessage, IMessageBroker
from src.ports.secondary.metrics import IMetrics
from src.ports.secondary.workflow_repository import IWorkflowRepository


class ExecuteWorkflowUseCase:
    """
    Use case for manually starting a workflow against a conversation.

    Responsibilities:
    1. Reject unknown, foreign and inactive workflows.
    2. Record the execution request and bump the workflow's counters.
    3. Publish the request for the automation engine (fire-and-forget).
    """
    def __init__(
        self,
        workflow_repository: IWorkflowRepository,
        execution_repository: IExecutionRepository,
        message_broker: IMessageBroker,
        metrics: IMetrics | None = None,
    ):
        self._workflow_repository = workflow_repository
        self._execution_repository = execution_repository
        self._message_broker = message_broker
        self._metrics = metrics

    async def execute(
        self,
        workflow_id: str,
        tenant_id: str,
        contact_id: str,
        conversation_id: str,
        trigger_data: dict | None = None,
    ) -> str:
        workflow = await load_owned_workflow(self._workflow_repository, workflow_id, tenant_id)
        if not workflow.is_active:
            raise InactiveWorkflowError(workflow_id)

        execution = WorkflowExecution(
            workflow_id=workflow.id,
            contact_id=contact_id,
            conversation_id=conversation_id,
            trigger_data=trigger_data or {},
        )
        await self._execution_repository.save(execution)

        workflow.record_execution()
        await self._workflow_repository.update(workflow)

        await self._message_broker.publish_execution_request(
            ExecutionRequestMessage(
                execution_id=execution.id,
                workflow_id=workflow.id,
                tenant_id=tenant_id,
                contact_id=contact_id,
                conversation_id=conversation_id,
                trigger_data=execution.trigger_data,
            )
        )
        if self._metrics:
            self._metrics.record_execution_request()

        return execution.id
