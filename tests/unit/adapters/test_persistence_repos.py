import json
from datetime import datetime, timezone

import pytest
from unittest.mock import AsyncMock, MagicMock
from src.adapters.secondary.persistence.pg_workflow_repository import PostgresWorkflowRepository
from src.adapters.secondary.persistence.pg_execution_repository import PostgresExecutionRepository
from src.adapters.secondary.persistence.models import WorkflowModel, ExecutionModel
from src.domain.workflow.entities.execution import ExecutionStatus, WorkflowExecution
from src.domain.workflow.entities.node import parse_nodes
from src.domain.workflow.entities.workflow import Workflow
from src.domain.workflow.value_objects.node_type import NodeType
from tests.node_factory import simple_workflow


@pytest.fixture
def mock_session():
    session = AsyncMock()
    session.add = MagicMock()
    return session


def query_result(*, one=None, many=()):
    result = MagicMock()
    result.scalar_one_or_none.return_value = one
    result.scalars.return_value.all.return_value = list(many)
    return result


class TestPgWorkflowRepository:
    @pytest.mark.asyncio
    async def test_save_workflow_serializes_graph(self, mock_session):
        repo = PostgresWorkflowRepository(mock_session)
        workflow = Workflow(
            name="Reply", tenant_id="acme", created_by="u1", nodes=parse_nodes(simple_workflow()), tags=["vip"]
        )

        await repo.save(workflow)

        model = mock_session.add.call_args[0][0]
        assert isinstance(model, WorkflowModel)
        assert model.id == workflow.id
        assert model.tenant_id == "acme"
        assert [node["id"] for node in json.loads(model.nodes_json)] == ["t1", "a1", "end"]
        assert json.loads(model.tags_json) == ["vip"]
        mock_session.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_get_workflow(self, mock_session):
        repo = PostgresWorkflowRepository(mock_session)
        mock_session.execute.return_value = query_result(
            one=WorkflowModel(
                id="w1",
                tenant_id="acme",
                name="Reply",
                is_active=True,
                created_by="u1",
                nodes_json=json.dumps(simple_workflow()),
                execution_count=3,
            )
        )

        result = await repo.get_by_id("w1")

        assert result.id == "w1"
        assert result.is_active
        assert result.execution_count == 3
        assert [node.type for node in result.nodes] == [NodeType.TRIGGER, NodeType.ACTION, NodeType.END]
        assert result.tags == []
        assert result.metadata == {}

    @pytest.mark.asyncio
    async def test_get_missing_workflow(self, mock_session):
        mock_session.execute.return_value = query_result()

        assert await PostgresWorkflowRepository(mock_session).get_by_id("nope") is None

    @pytest.mark.asyncio
    async def test_list_by_tenant(self, mock_session):
        mock_session.execute.return_value = query_result(
            many=[
                WorkflowModel(id="w1", tenant_id="acme", name="One", created_by="u1"),
                WorkflowModel(id="w2", tenant_id="acme", name="Two", created_by="u1"),
            ]
        )

        result = await PostgresWorkflowRepository(mock_session).list_by_tenant("acme")

        assert [w.id for w in result] == ["w1", "w2"]
        assert result[0].nodes == []

    @pytest.mark.asyncio
    async def test_update_workflow(self, mock_session):
        model = WorkflowModel(id="w1", tenant_id="acme", name="Old", created_by="u1")
        mock_session.execute.return_value = query_result(one=model)
        workflow = Workflow(id="w1", name="New", tenant_id="acme", created_by="u1", is_active=True)

        await PostgresWorkflowRepository(mock_session).update(workflow)

        assert model.name == "New"
        assert model.is_active is True
        mock_session.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_delete_removes_history_first(self, mock_session):
        await PostgresWorkflowRepository(mock_session).delete("w1")

        statements = [call.args[0] for call in mock_session.execute.call_args_list]
        assert [s.table.name for s in statements] == ["workflow_executions", "workflows"]
        mock_session.commit.assert_called_once()


class TestPgExecutionRepository:
    @pytest.mark.asyncio
    async def test_save_execution(self, mock_session):
        execution = WorkflowExecution(
            workflow_id="w1", contact_id="c1", conversation_id="conv1", trigger_data={"text": "price"}
        )

        await PostgresExecutionRepository(mock_session).save(execution)

        model = mock_session.add.call_args[0][0]
        assert isinstance(model, ExecutionModel)
        assert model.status == "running"
        assert json.loads(model.trigger_data) == {"text": "price"}
        mock_session.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_list_by_workflow(self, mock_session):
        started = datetime(2026, 3, 1, tzinfo=timezone.utc)
        mock_session.execute.return_value = query_result(
            many=[
                ExecutionModel(
                    id="e1",
                    workflow_id="w1",
                    contact_id="c1",
                    conversation_id="conv1",
                    status="completed",
                    trigger_data="{}",
                    started_at=started,
                    completed_at=started,
                )
            ]
        )

        result = await PostgresExecutionRepository(mock_session).list_by_workflow("w1")

        assert len(result) == 1
        assert result[0].status == ExecutionStatus.COMPLETED
        assert result[0].duration_seconds == 0
