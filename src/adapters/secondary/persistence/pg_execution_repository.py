import json

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.adapters.secondary.persistence.models import ExecutionModel
from src.domain.workflow.entities.execution import ExecutionStatus, WorkflowExecution
from src.ports.secondary.execution_repository import IExecutionRepository


class PostgresExecutionRepository(IExecutionRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, execution: WorkflowExecution) -> None:
        model = ExecutionModel(
            id=execution.id,
            workflow_id=execution.workflow_id,
            contact_id=execution.contact_id,
            conversation_id=execution.conversation_id,
            status=execution.status.value,
            trigger_data=json.dumps(execution.trigger_data),
            current_node_id=execution.current_node_id,
            error=execution.error,
            started_at=execution.started_at,
            completed_at=execution.completed_at,
        )
        self._session.add(model)
        await self._session.commit()

    async def list_by_workflow(self, workflow_id: str) -> list[WorkflowExecution]:
        result = await self._session.execute(
            select(ExecutionModel)
            .where(ExecutionModel.workflow_id == workflow_id)
            .order_by(ExecutionModel.started_at)
        )
        return [
            WorkflowExecution(
                id=model.id,
                workflow_id=model.workflow_id,
                contact_id=model.contact_id,
                conversation_id=model.conversation_id,
                status=ExecutionStatus(model.status),
                trigger_data=json.loads(model.trigger_data or "{}"),
                current_node_id=model.current_node_id,
                error=model.error,
                started_at=model.started_at,
                completed_at=model.completed_at,
            )
            for model in result.scalars().all()
        ]
