from src.application.workflow.save_gate import WorkflowSaveGate
from src.domain.workflow.entities.node import parse_nodes
from src.domain.workflow.services.workflow_validator import generate_workflow_summary


class ValidateWorkflowUseCase:
    def __init__(self, save_gate: WorkflowSaveGate):
        self._save_gate = save_gate

    async def execute(self, nodes: list) -> dict:
        """
        Validates an editor graph without persisting anything.

        Returns the verdict plus a one-line summary of the node counts, which the
        editor shows in its validation panel.
        """
        parsed = parse_nodes(nodes)
        result = self._save_gate.validate(parsed)
        return {**result.to_dict(), "summary": generate_workflow_summary(parsed)}
