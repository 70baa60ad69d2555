from datetime import datetime

from pydantic import BaseModel, Field, StrictBool

from src.domain.workflow.entities.workflow import Workflow
from src.domain.workflow.value_objects.template import WorkflowCategory, WorkflowTemplate


class WorkflowValidateRequest(BaseModel):
    nodes: list[dict] = Field(default_factory=list)


class WorkflowValidateResponse(BaseModel):
    is_valid: bool
    errors: list[str]
    warnings: list[str]
    summary: str


class WorkflowCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    nodes: list[dict] = Field(default_factory=list)
    confirm_warnings: bool = False


class WorkflowUpdateRequest(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    nodes: list[dict] | None = None
    tags: list[str] | None = None
    confirm_warnings: bool = False


class WorkflowToggleRequest(BaseModel):
    is_active: StrictBool
    confirm_warnings: bool = False


class WorkflowExecuteRequest(BaseModel):
    contact_id: str = Field(..., min_length=1)
    conversation_id: str = Field(..., min_length=1)
    trigger_data: dict = Field(default_factory=dict)


class TemplateInstantiateRequest(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)


class WorkflowResponse(BaseModel):
    id: str
    tenant_id: str
    name: str
    description: str | None
    is_active: bool
    nodes: list[dict]
    created_by: str
    created_at: datetime
    updated_at: datetime
    last_executed_at: datetime | None
    execution_count: int
    tags: list[str]
    metadata: dict

    @classmethod
    def from_entity(cls, workflow: Workflow) -> "WorkflowResponse":
        return cls(
            id=workflow.id,
            tenant_id=workflow.tenant_id,
            name=workflow.name,
            description=workflow.description,
            is_active=workflow.is_active,
            nodes=[node.to_json() for node in workflow.nodes],
            created_by=workflow.created_by,
            created_at=workflow.created_at,
            updated_at=workflow.updated_at,
            last_executed_at=workflow.last_executed_at,
            execution_count=workflow.execution_count,
            tags=workflow.tags,
            metadata=workflow.metadata,
        )


class WorkflowMutationResponse(BaseModel):
    success: bool = True
    message: str | None = None
    workflow: WorkflowResponse | None = None
    warnings: list[str] = Field(default_factory=list)


class WorkflowDetailResponse(BaseModel):
    success: bool = True
    workflow: WorkflowResponse


class WorkflowListResponse(BaseModel):
    success: bool = True
    workflows: list[WorkflowResponse]


class WorkflowExecuteResponse(BaseModel):
    success: bool = True
    execution_id: str
    message: str = "Workflow execution requested"


class WorkflowStatsResponse(BaseModel):
    workflow_id: str
    total_executions: int
    successful_executions: int
    failed_executions: int
    executions_today: int
    executions_this_week: int
    executions_this_month: int
    average_execution_time: int


class TemplateResponse(BaseModel):
    id: str
    name: str
    description: str
    category: WorkflowCategory
    nodes: list[dict]
    is_public: bool
    preview_image: str | None = None

    @classmethod
    def from_template(cls, template: WorkflowTemplate) -> "TemplateResponse":
        return cls(
            id=template.id,
            name=template.name,
            description=template.description,
            category=template.category,
            nodes=[node.to_json() for node in template.nodes],
            is_public=template.is_public,
            preview_image=template.preview_image,
        )


class TemplateListResponse(BaseModel):
    success: bool = True
    templates: list[TemplateResponse]


class ErrorDetail(BaseModel):
    message: str
    error_code: str
    context: dict = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    error: ErrorDetail
