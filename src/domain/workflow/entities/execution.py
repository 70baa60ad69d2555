from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class ExecutionStatus(str, Enum):
    """
    Lifecycle of an execution request, as reported by the automation engine.

    States:
        RUNNING: Request accepted and handed to the engine.
        COMPLETED: The engine reached the end of the workflow.
        FAILED: The engine stopped with an error.
        PAUSED: Waiting on a delay node or an external event.
    """

    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
    PAUSED = "paused"


@dataclass
class WorkflowExecution:
    """
    A single run of a workflow against a conversation.

    Only the request is created here; the engine that walks the graph updates
    status, current_node_id and completed_at in the same store.
    """

    workflow_id: str
    contact_id: str
    conversation_id: str
    id: str = field(default_factory=lambda: str(uuid4()))
    status: ExecutionStatus = ExecutionStatus.RUNNING
    trigger_data: dict = field(default_factory=dict)
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    completed_at: datetime | None = None
    current_node_id: str | None = None
    error: str | None = None

    @property
    def duration_seconds(self) -> float | None:
        if self.completed_at is None:
            return None
        return (self.completed_at - self.started_at).total_seconds()
