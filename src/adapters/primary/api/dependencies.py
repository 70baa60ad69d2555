from dataclasses import dataclass

from fastapi import Header

from src.adapters.secondary.persistence.pg_execution_repository import PostgresExecutionRepository
from src.adapters.secondary.persistence.pg_workflow_repository import PostgresWorkflowRepository
from src.adapters.secondary.redis.redis_message_broker import RedisMessageBroker
from src.application.workflow.save_gate import WorkflowSaveGate
from src.application.workflow.use_cases.create_from_template import CreateFromTemplateUseCase
from src.application.workflow.use_cases.create_workflow import CreateWorkflowUseCase
from src.application.workflow.use_cases.delete_workflow import DeleteWorkflowUseCase
from src.application.workflow.use_cases.execute_workflow import ExecuteWorkflowUseCase
from src.application.workflow.use_cases.get_workflow import GetWorkflowUseCase, ListWorkflowsUseCase
from src.application.workflow.use_cases.get_workflow_stats import GetWorkflowStatsUseCase
from src.application.workflow.use_cases.list_templates import ListTemplatesUseCase
from src.application.workflow.use_cases.toggle_workflow import ToggleWorkflowUseCase
from src.application.workflow.use_cases.update_workflow import UpdateWorkflowUseCase
from src.application.workflow.use_cases.validate_workflow import ValidateWorkflowUseCase
from src.domain.workflow.value_objects.template import TemplateCatalog
from src.shared.config import settings
from src.shared.database import async_session_factory
from src.shared.logger import bind_context, clear_context
from src.shared.metrics import metrics_registry
from src.shared.redis_client import redis_client

template_catalog = TemplateCatalog.builtin()


@dataclass(frozen=True)
class TenantContext:
    tenant_id: str
    user_id: str


async def get_tenant_context(
    x_tenant_id: str | None = Header(None),
    x_user_id: str | None = Header(None),
) -> TenantContext:
    """
    Tenant and acting user as forwarded by the authenticating gateway.

    Also binds both ids to the structlog context so every log line of the
    request carries them. Runs on the event loop so the binding reaches the route.
    """
    tenant = TenantContext(
        tenant_id=x_tenant_id or settings.DEFAULT_TENANT_ID,
        user_id=x_user_id or settings.DEFAULT_USER_ID,
    )
    clear_context()
    bind_context({"tenant_id": tenant.tenant_id, "user_id": tenant.user_id})
    return tenant


def get_save_gate() -> WorkflowSaveGate:
    return WorkflowSaveGate(metrics=metrics_registry, max_nodes=settings.WORKFLOW_MAX_NODES)


def get_validate_workflow_use_case() -> ValidateWorkflowUseCase:
    return ValidateWorkflowUseCase(save_gate=get_save_gate())


def get_list_templates_use_case() -> ListTemplatesUseCase:
    return ListTemplatesUseCase(catalog=template_catalog)


async def get_create_workflow_use_case() -> CreateWorkflowUseCase:
    async with async_session_factory() as session:
        yield CreateWorkflowUseCase(
            workflow_repository=PostgresWorkflowRepository(session),
            save_gate=get_save_gate(),
        )


async def get_update_workflow_use_case() -> UpdateWorkflowUseCase:
    async with async_session_factory() as session:
        yield UpdateWorkflowUseCase(
            workflow_repository=PostgresWorkflowRepository(session),
            save_gate=get_save_gate(),
        )


async def get_toggle_workflow_use_case() -> ToggleWorkflowUseCase:
    async with async_session_factory() as session:
        yield ToggleWorkflowUseCase(
            workflow_repository=PostgresWorkflowRepository(session),
            save_gate=get_save_gate(),
        )


async def get_delete_workflow_use_case() -> DeleteWorkflowUseCase:
    async with async_session_factory() as session:
        yield DeleteWorkflowUseCase(workflow_repository=PostgresWorkflowRepository(session))


async def get_get_workflow_use_case() -> GetWorkflowUseCase:
    async with async_session_factory() as session:
        yield GetWorkflowUseCase(workflow_repository=PostgresWorkflowRepository(session))


async def get_list_workflows_use_case() -> ListWorkflowsUseCase:
    async with async_session_factory() as session:
        yield ListWorkflowsUseCase(workflow_repository=PostgresWorkflowRepository(session))


async def get_execute_workflow_use_case() -> ExecuteWorkflowUseCase:
    async with async_session_factory() as session:
        yield ExecuteWorkflowUseCase(
            workflow_repository=PostgresWorkflowRepository(session),
            execution_repository=PostgresExecutionRepository(session),
            message_broker=RedisMessageBroker(redis_client),
            metrics=metrics_registry,
        )


async def get_workflow_stats_use_case() -> GetWorkflowStatsUseCase:
    async with async_session_factory() as session:
        yield GetWorkflowStatsUseCase(
            workflow_repository=PostgresWorkflowRepository(session),
            execution_repository=PostgresExecutionRepository(session),
        )


async def get_create_from_template_use_case() -> CreateFromTemplateUseCase:
    async with async_session_factory() as session:
        yield CreateFromTemplateUseCase(
            workflow_repository=PostgresWorkflowRepository(session),
            catalog=template_catalog,
        )
