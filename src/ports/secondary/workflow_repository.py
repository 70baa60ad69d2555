from abc import ABC, abstractmethod

from src.domain.workflow.entities.workflow import Workflow


class IWorkflowRepository(ABC):
    """
    Interface for persistence of Workflow aggregates.

    Stores the editor graph together with activation state and execution counters.
    """

    @abstractmethod
    async def save(self, workflow: Workflow) -> None:
        """Persists a new workflow."""
        pass

    @abstractmethod
    async def get_by_id(self, workflow_id: str) -> Workflow | None:
        """Retrieves a workflow by its unique ID."""
        pass

    @abstractmethod
    async def list_by_tenant(self, tenant_id: str) -> list[Workflow]:
        """Retrieves all workflows owned by a tenant, oldest first."""
        pass

    @abstractmethod
    async def update(self, workflow: Workflow) -> None:
        """Writes back every mutable field of an existing workflow."""
        pass

    @abstractmethod
    async def delete(self, workflow_id: str) -> None:
        """Removes a workflow and its execution history."""
        pass
