from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from src.domain.workflow.entities.node import WorkflowNode


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Workflow:
    """
    Root aggregate for a tenant's automation.

    Attributes:
        name (str): Human-readable name of the workflow.
        tenant_id (str): Owning tenant.
        created_by (str): Id of the user who created it.
        nodes (list[WorkflowNode]): The graph as last saved from the editor.
        is_active (bool): Whether incoming events may start the workflow.
        execution_count (int): Number of execution requests issued.
    """

    name: str
    tenant_id: str
    created_by: str
    description: str | None = None
    nodes: list[WorkflowNode] = field(default_factory=list)
    is_active: bool = False
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)
    last_executed_at: datetime | None = None
    execution_count: int = 0
    tags: list[str] = field(default_factory=list)
    metadata: dict = field(default_factory=dict)

    def belongs_to(self, tenant_id: str) -> bool:
        return self.tenant_id == tenant_id

    def apply_update(
        self,
        name: str | None = None,
        description: str | None = None,
        nodes: list[WorkflowNode] | None = None,
        tags: list[str] | None = None,
    ) -> None:
        """Applies a partial update; the id is never changed."""
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if nodes is not None:
            self.nodes = list(nodes)
        if tags is not None:
            self.tags = list(tags)
        self.updated_at = utc_now()

    def set_active(self, is_active: bool) -> None:
        self.is_active = is_active
        self.updated_at = utc_now()

    def record_execution(self) -> None:
        self.execution_count += 1
        self.last_executed_at = utc_now()
