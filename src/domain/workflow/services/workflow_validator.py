from collections import Counter

from src.domain.workflow.entities.node import WorkflowNode
from src.domain.workflow.value_objects.graph import WorkflowGraph
from src.domain.workflow.value_objects.node_type import NodeType
from src.domain.workflow.value_objects.validation_result import ValidationResult

EMPTY_WORKFLOW = "workflow must have at least one node"
MISSING_TRIGGER = "workflow must have at least one trigger node"
MULTIPLE_TRIGGERS = "multiple triggers may cause unexpected behavior"
INFINITE_LOOP = "possible infinite loop detected in workflow"


class WorkflowValidator:
    """
    Decides whether an editor-built graph is well-formed enough to be persisted
    and activated.

    Every check scans the whole node list and appends to the error or warning
    list; only the empty graph returns early. The validator is pure and never
    raises for parsed nodes, so it can be shared freely between requests.

    Checks, in output order:
    1. Non-empty graph.
    2. Trigger presence (none is an error, several is a warning).
    3. Orphans: non-trigger nodes that no connection points to (warning).
    4. Dead ends: non-end nodes without outgoing connections (warning).
    5. Per-node configuration completeness (errors; delay is a warning).
    6. Cycles (a single error, however many cycles exist).
    7. Graph integrity: dangling connection targets and repeated ids (errors).
    """

    def validate(self, nodes: list[WorkflowNode]) -> ValidationResult:
        if not nodes:
            return ValidationResult(errors=(EMPTY_WORKFLOW,))

        errors: list[str] = []
        warnings: list[str] = []

        self._check_triggers(nodes, errors, warnings)
        self._check_orphans(nodes, warnings)
        self._check_dead_ends(nodes, warnings)
        for node in nodes:
            self._check_configuration(node, errors, warnings)

        graph = WorkflowGraph.from_nodes(nodes)
        if graph.has_cycle():
            errors.append(INFINITE_LOOP)
        self._check_integrity(graph, errors)

        return ValidationResult(errors=tuple(errors), warnings=tuple(warnings))

    def _check_triggers(self, nodes, errors, warnings) -> None:
        trigger_count = sum(1 for node in nodes if node.type == NodeType.TRIGGER)
        if trigger_count == 0:
            errors.append(MISSING_TRIGGER)
        elif trigger_count > 1:
            warnings.append(MULTIPLE_TRIGGERS)

    def _check_orphans(self, nodes, warnings) -> None:
        targets = {target for node in nodes for target in node.connections}
        for node in nodes:
            if node.type != NodeType.TRIGGER and node.id not in targets:
                warnings.append(f"{node.display_label} has no incoming connections")

    def _check_dead_ends(self, nodes, warnings) -> None:
        for node in nodes:
            if node.type != NodeType.END and not node.connections:
                warnings.append(f"{node.display_label} has no outgoing connections")

    def _check_configuration(self, node: WorkflowNode, errors, warnings) -> None:
        label = node.display_label

        if node.type == NodeType.DELAY:
            if node.data.delay is None or not node.data.delay > 0:
                warnings.append(f"{label}: delay not configured or invalid")
            return

        if node.type == NodeType.END:
            return

        record = node.record()
        if record is None:
            errors.append(f"{label}: {node.type.value} configuration not defined")
            return

        errors.extend(f"{label}: {issue}" for issue in record.config.issues())

    def _check_integrity(self, graph: WorkflowGraph, errors) -> None:
        for source, target in graph.dangling_connections():
            errors.append(f'{source.display_label}: connection target "{target}" not found')
        for node_id in graph.duplicate_ids:
            errors.append(f'duplicate node id "{node_id}"')


def validate_workflow(nodes: list[WorkflowNode]) -> ValidationResult:
    return WorkflowValidator().validate(nodes)


def node_type_display_name(node_type: NodeType) -> str:
    return node_type.display_name


def generate_workflow_summary(nodes: list[WorkflowNode]) -> str:
    counts = Counter(node.type for node in nodes)
    return ", ".join(
        f"{counts[node_type]} {node_type_display_name(node_type).lower()}(s)"
        for node_type in (NodeType.TRIGGER, NodeType.CONDITION, NodeType.ACTION, NodeType.DELAY)
    )
