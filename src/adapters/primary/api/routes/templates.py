from fastapi import APIRouter, Depends, status
from src.adapters.primary.api.dto import (
    ErrorResponse,
    TemplateInstantiateRequest,
    TemplateListResponse,
    TemplateResponse,
    WorkflowMutationResponse,
    WorkflowResponse,
)
from src.adapters.primary.api.dependencies import (
    TenantContext,
    get_create_from_template_use_case,
    get_list_templates_use_case,
    get_tenant_context,
)
from src.application.workflow.use_cases.create_from_template import CreateFromTemplateUseCase
from src.application.workflow.use_cases.list_templates import ListTemplatesUseCase
from src.domain.workflow.value_objects.template import WorkflowCategory
from src.shared.metrics import metrics_registry
from src.shared.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/workflow-templates", tags=["Templates"])


@router.get(
    "",
    response_model=TemplateListResponse,
    summary="List workflow templates",
)
async def list_templates(
    category: WorkflowCategory | None = None,
    use_case: ListTemplatesUseCase = Depends(get_list_templates_use_case),
) -> TemplateListResponse:
    templates = await use_case.execute(category)
    return TemplateListResponse(templates=[TemplateResponse.from_template(t) for t in templates])


@router.post(
    "/{template_id}/create",
    response_model=WorkflowMutationResponse,
    responses={404: {"model": ErrorResponse}},
    status_code=status.HTTP_201_CREATED,
    summary="Create a workflow from a template",
)
async def create_from_template(
    template_id: str,
    request: TemplateInstantiateRequest = TemplateInstantiateRequest(),
    tenant: TenantContext = Depends(get_tenant_context),
    use_case: CreateFromTemplateUseCase = Depends(get_create_from_template_use_case),
) -> WorkflowMutationResponse:
    workflow = await use_case.execute(
        template_id=template_id,
        tenant_id=tenant.tenant_id,
        created_by=tenant.user_id,
        name=request.name,
    )

    metrics_registry.record_mutation("create_from_template")
    logger.info("workflow_created_from_template", template_id=template_id, workflow_id=workflow.id)

    return WorkflowMutationResponse(
        message="Workflow created from template",
        workflow=WorkflowResponse.from_entity(workflow),
    )
