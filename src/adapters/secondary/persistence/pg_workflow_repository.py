import json

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.adapters.secondary.persistence.models import ExecutionModel, WorkflowModel
from src.domain.workflow.entities.node import parse_nodes
from src.domain.workflow.entities.workflow import Workflow
from src.ports.secondary.workflow_repository import IWorkflowRepository


class PostgresWorkflowRepository(IWorkflowRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, workflow: Workflow) -> None:
        model = WorkflowModel(id=workflow.id, tenant_id=workflow.tenant_id)
        self._copy_to_model(workflow, model)
        self._session.add(model)
        await self._session.commit()

    async def get_by_id(self, workflow_id: str) -> Workflow | None:
        model = await self._get_model(workflow_id)
        if not model:
            return None
        return self._to_entity(model)

    async def list_by_tenant(self, tenant_id: str) -> list[Workflow]:
        result = await self._session.execute(
            select(WorkflowModel)
            .where(WorkflowModel.tenant_id == tenant_id)
            .order_by(WorkflowModel.created_at)
        )
        return [self._to_entity(model) for model in result.scalars().all()]

    async def update(self, workflow: Workflow) -> None:
        model = await self._get_model(workflow.id)
        if model:
            self._copy_to_model(workflow, model)
            await self._session.commit()

    async def delete(self, workflow_id: str) -> None:
        await self._session.execute(
            delete(ExecutionModel).where(ExecutionModel.workflow_id == workflow_id)
        )
        await self._session.execute(delete(WorkflowModel).where(WorkflowModel.id == workflow_id))
        await self._session.commit()

    async def _get_model(self, workflow_id: str) -> WorkflowModel | None:
        result = await self._session.execute(
            select(WorkflowModel).where(WorkflowModel.id == workflow_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    def _copy_to_model(workflow: Workflow, model: WorkflowModel) -> None:
        model.name = workflow.name
        model.description = workflow.description
        model.is_active = workflow.is_active
        model.nodes_json = json.dumps([node.to_json() for node in workflow.nodes])
        model.created_by = workflow.created_by
        model.created_at = workflow.created_at
        model.updated_at = workflow.updated_at
        model.last_executed_at = workflow.last_executed_at
        model.execution_count = workflow.execution_count
        model.tags_json = json.dumps(workflow.tags)
        model.metadata_json = json.dumps(workflow.metadata)

    @staticmethod
    def _to_entity(model: WorkflowModel) -> Workflow:
        return Workflow(
            id=model.id,
            tenant_id=model.tenant_id,
            name=model.name,
            description=model.description,
            is_active=bool(model.is_active),
            nodes=parse_nodes(json.loads(model.nodes_json or "[]")),
            created_by=model.created_by,
            created_at=model.created_at,
            updated_at=model.updated_at,
            last_executed_at=model.last_executed_at,
            execution_count=model.execution_count or 0,
            tags=json.loads(model.tags_json or "[]"),
            metadata=json.loads(model.metadata_json or "{}"),
        )
