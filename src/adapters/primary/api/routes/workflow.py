from fastapi import APIRouter, Depends, Response, status
from src.adapters.primary.api.dto import (
    ErrorResponse,
    WorkflowCreateRequest,
    WorkflowDetailResponse,
    WorkflowExecuteRequest,
    WorkflowExecuteResponse,
    WorkflowListResponse,
    WorkflowMutationResponse,
    WorkflowResponse,
    WorkflowStatsResponse,
    WorkflowToggleRequest,
    WorkflowUpdateRequest,
    WorkflowValidateRequest,
    WorkflowValidateResponse,
)
from src.adapters.primary.api.dependencies import (
    TenantContext,
    get_create_workflow_use_case,
    get_delete_workflow_use_case,
    get_execute_workflow_use_case,
    get_get_workflow_use_case,
    get_list_workflows_use_case,
    get_tenant_context,
    get_toggle_workflow_use_case,
    get_update_workflow_use_case,
    get_validate_workflow_use_case,
    get_workflow_stats_use_case,
)
from src.application.workflow.use_cases.create_workflow import CreateWorkflowUseCase
from src.application.workflow.use_cases.delete_workflow import DeleteWorkflowUseCase
from src.application.workflow.use_cases.execute_workflow import ExecuteWorkflowUseCase
from src.application.workflow.use_cases.get_workflow import GetWorkflowUseCase, ListWorkflowsUseCase
from src.application.workflow.use_cases.get_workflow_stats import GetWorkflowStatsUseCase
from src.application.workflow.use_cases.toggle_workflow import ToggleWorkflowUseCase
from src.application.workflow.use_cases.update_workflow import UpdateWorkflowUseCase
from src.application.workflow.use_cases.validate_workflow import ValidateWorkflowUseCase
from src.shared.metrics import metrics_registry
from src.shared.logger import get_logger

logger = get_logger(__name__)

API_VERSION = "v1"
router = APIRouter(prefix=f"/api/{API_VERSION}/workflows", tags=["Workflow"])


@router.post(
    "/validate",
    response_model=WorkflowValidateResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Validate a workflow graph",
    description="Run the editor's graph checks without saving anything.",
)
async def validate_workflow(
    request: WorkflowValidateRequest,
    use_case: ValidateWorkflowUseCase = Depends(get_validate_workflow_use_case),
) -> WorkflowValidateResponse:
    """
    Validates a node list exactly as the editor holds it.

    An invalid graph is still a successful call: the verdict, errors and
    warnings are returned with 200. Only malformed nodes are rejected.
    """
    result = await use_case.execute(request.nodes)
    return WorkflowValidateResponse(**result)


@router.get(
    "",
    response_model=WorkflowListResponse,
    summary="List workflows",
)
async def list_workflows(
    tenant: TenantContext = Depends(get_tenant_context),
    use_case: ListWorkflowsUseCase = Depends(get_list_workflows_use_case),
) -> WorkflowListResponse:
    workflows = await use_case.execute(tenant.tenant_id)
    return WorkflowListResponse(workflows=[WorkflowResponse.from_entity(w) for w in workflows])


@router.post(
    "",
    response_model=WorkflowMutationResponse,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
    status_code=status.HTTP_201_CREATED,
    summary="Create a workflow",
    description="Save a new, inactive workflow. An empty node list is kept as a draft.",
)
async def create_workflow(
    request: WorkflowCreateRequest,
    tenant: TenantContext = Depends(get_tenant_context),
    use_case: CreateWorkflowUseCase = Depends(get_create_workflow_use_case),
) -> WorkflowMutationResponse:
    workflow, result = await use_case.execute(
        tenant_id=tenant.tenant_id,
        created_by=tenant.user_id,
        name=request.name,
        description=request.description,
        nodes=request.nodes,
        confirm_warnings=request.confirm_warnings,
    )

    metrics_registry.record_mutation("create")

    logger.info(
        "workflow_created",
        workflow_id=workflow.id,
        tenant_id=tenant.tenant_id,
        node_count=len(workflow.nodes),
        warning_count=len(result.warnings),
    )

    return WorkflowMutationResponse(
        message="Workflow created successfully",
        workflow=WorkflowResponse.from_entity(workflow),
        warnings=list(result.warnings),
    )


@router.get(
    "/{workflow_id}",
    response_model=WorkflowDetailResponse,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get a workflow",
)
async def get_workflow(
    workflow_id: str,
    tenant: TenantContext = Depends(get_tenant_context),
    use_case: GetWorkflowUseCase = Depends(get_get_workflow_use_case),
) -> WorkflowDetailResponse:
    workflow = await use_case.execute(workflow_id, tenant.tenant_id)
    return WorkflowDetailResponse(workflow=WorkflowResponse.from_entity(workflow))


@router.put(
    "/{workflow_id}",
    response_model=WorkflowMutationResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
    summary="Update a workflow",
    description="Partially update a workflow. A new node list is validated before it is stored.",
)
async def update_workflow(
    workflow_id: str,
    request: WorkflowUpdateRequest,
    tenant: TenantContext = Depends(get_tenant_context),
    use_case: UpdateWorkflowUseCase = Depends(get_update_workflow_use_case),
) -> WorkflowMutationResponse:
    workflow, result = await use_case.execute(
        workflow_id=workflow_id,
        tenant_id=tenant.tenant_id,
        name=request.name,
        description=request.description,
        nodes=request.nodes,
        tags=request.tags,
        confirm_warnings=request.confirm_warnings,
    )

    metrics_registry.record_mutation("update")
    logger.info("workflow_updated", workflow_id=workflow_id, tenant_id=tenant.tenant_id)

    return WorkflowMutationResponse(
        message="Workflow updated successfully",
        workflow=WorkflowResponse.from_entity(workflow),
        warnings=list(result.warnings),
    )


@router.delete(
    "/{workflow_id}",
    response_model=WorkflowMutationResponse,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Delete a workflow",
    description="Delete a workflow together with its execution history.",
)
async def delete_workflow(
    workflow_id: str,
    tenant: TenantContext = Depends(get_tenant_context),
    use_case: DeleteWorkflowUseCase = Depends(get_delete_workflow_use_case),
) -> WorkflowMutationResponse:
    await use_case.execute(workflow_id, tenant.tenant_id)

    metrics_registry.record_mutation("delete")
    logger.info("workflow_deleted", workflow_id=workflow_id, tenant_id=tenant.tenant_id)

    return WorkflowMutationResponse(message="Workflow deleted successfully")


@router.patch(
    "/{workflow_id}/toggle",
    response_model=WorkflowMutationResponse,
    responses={
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
    summary="Activate or pause a workflow",
)
async def toggle_workflow(
    workflow_id: str,
    request: WorkflowToggleRequest,
    tenant: TenantContext = Depends(get_tenant_context),
    use_case: ToggleWorkflowUseCase = Depends(get_toggle_workflow_use_case),
) -> WorkflowMutationResponse:
    workflow, result = await use_case.execute(
        workflow_id=workflow_id,
        tenant_id=tenant.tenant_id,
        is_active=request.is_active,
        confirm_warnings=request.confirm_warnings,
    )

    metrics_registry.record_mutation("activate" if workflow.is_active else "pause")
    logger.info("workflow_toggled", workflow_id=workflow_id, is_active=workflow.is_active)

    return WorkflowMutationResponse(
        message=f"Workflow {'activated' if workflow.is_active else 'paused'} successfully",
        workflow=WorkflowResponse.from_entity(workflow),
        warnings=list(result.warnings),
    )


@router.post(
    "/{workflow_id}/execute",
    response_model=WorkflowExecuteResponse,
    responses={
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    status_code=status.HTTP_202_ACCEPTED,
    summary="Request a workflow run",
    description="Record a run for a contact and hand it to the execution engine.",
)
async def execute_workflow(
    workflow_id: str,
    request: WorkflowExecuteRequest,
    tenant: TenantContext = Depends(get_tenant_context),
    use_case: ExecuteWorkflowUseCase = Depends(get_execute_workflow_use_case),
) -> WorkflowExecuteResponse:
    execution_id = await use_case.execute(
        workflow_id=workflow_id,
        tenant_id=tenant.tenant_id,
        contact_id=request.contact_id,
        conversation_id=request.conversation_id,
        trigger_data=request.trigger_data,
    )
    return WorkflowExecuteResponse(execution_id=execution_id)


@router.get(
    "/{workflow_id}/stats",
    response_model=WorkflowStatsResponse,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get execution statistics",
)
async def get_workflow_stats(
    workflow_id: str,
    tenant: TenantContext = Depends(get_tenant_context),
    use_case: GetWorkflowStatsUseCase = Depends(get_workflow_stats_use_case),
) -> WorkflowStatsResponse:
    stats = await use_case.execute(workflow_id, tenant.tenant_id)
    return WorkflowStatsResponse(**stats)
