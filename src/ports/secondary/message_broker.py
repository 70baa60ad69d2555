from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class ExecutionRequestMessage:
    """
    Payload handed to the automation engine to start a workflow run.

    Attributes:
        execution_id (str): Id of the execution record created for this run.
        workflow_id (str): The workflow to run.
        tenant_id (str): Owning tenant.
        contact_id (str): Contact the run is about.
        conversation_id (str): Conversation that triggered the run.
        trigger_data (dict): Event data passed to the trigger node.
    """
    execution_id: str
    workflow_id: str
    tenant_id: str
    contact_id: str
    conversation_id: str
    trigger_data: dict = field(default_factory=dict)


class IMessageBroker(ABC):
    """
    Interface for the queue the automation engine consumes.

    Publishing is fire-and-forget: the caller never waits for the run itself.
    """
    @abstractmethod
    async def publish_execution_request(self, request: ExecutionRequestMessage) -> str:
        """Publishes an execution request and returns the broker message id."""
        pass
