from datetime import datetime, timedelta, timezone

from src.application.workflow.access import load_owned_workflow
from src.domain.workflow.entities.execution import ExecutionStatus
from src.ports.secondary.execution_repository import IExecutionRepository
from src.ports.secondary.workflow_repository import IWorkflowRepository


class GetWorkflowStatsUseCase:
    def __init__(
        self,
        workflow_repository: IWorkflowRepository,
        execution_repository: IExecutionRepository,
    ):
        self._workflow_repository = workflow_repository
        self._execution_repository = execution_repository

    async def execute(self, workflow_id: str, tenant_id: str, now: datetime | None = None) -> dict:
        """
        Aggregates execution history for a workflow.

        "Today" and "this month" are calendar boundaries in UTC; "this week" is
        the trailing seven days. The average only covers completed runs and is
        rounded to whole seconds.
        """
        await load_owned_workflow(self._workflow_repository, workflow_id, tenant_id)
        executions = await self._execution_repository.list_by_workflow(workflow_id)

        now = now or datetime.now(timezone.utc)
        today = now.replace(hour=0, minute=0, second=0, microsecond=0)
        this_week = now - timedelta(days=7)
        this_month = today.replace(day=1)

        durations = [
            e.duration_seconds
            for e in executions
            if e.status == ExecutionStatus.COMPLETED and e.duration_seconds is not None
        ]

        return {
            "workflow_id": workflow_id,
            "total_executions": len(executions),
            "successful_executions": sum(1 for e in executions if e.status == ExecutionStatus.COMPLETED),
            "failed_executions": sum(1 for e in executions if e.status == ExecutionStatus.FAILED),
            "executions_today": sum(1 for e in executions if e.started_at >= today),
            "executions_this_week": sum(1 for e in executions if e.started_at >= this_week),
            "executions_this_month": sum(1 for e in executions if e.started_at >= this_month),
            "average_execution_time": round(sum(durations) / len(durations)) if durations else 0,
        }
