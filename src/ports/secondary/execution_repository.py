from abc import ABC, abstractmethod

from src.domain.workflow.entities.execution import WorkflowExecution


class IExecutionRepository(ABC):
    """
    Interface for persistence of execution requests.

    Rows are created here and advanced by the automation engine; this service
    only reads them back for statistics.
    """
    @abstractmethod
    async def save(self, execution: WorkflowExecution) -> None:
        """Persists a new execution record."""
        pass

    @abstractmethod
    async def list_by_workflow(self, workflow_id: str) -> list[WorkflowExecution]:
        """Retrieves every execution of a workflow."""
        pass
