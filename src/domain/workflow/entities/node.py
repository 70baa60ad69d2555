import math
from dataclasses import dataclass, field

from src.domain.workflow.exceptions import InvalidNodeError, InvalidWorkflowError
from src.domain.workflow.value_objects.node_config import (
    ACTION_CONFIGS,
    CONDITION_CONFIGS,
    TRIGGER_CONFIGS,
    NodeConfig,
)
from src.domain.workflow.value_objects.node_type import (
    ActionType,
    ConditionType,
    NodeType,
    TriggerType,
)


@dataclass(frozen=True)
class TriggerRecord:
    type: TriggerType
    config: NodeConfig


@dataclass(frozen=True)
class ActionRecord:
    type: ActionType
    config: NodeConfig


@dataclass(frozen=True)
class ConditionRecord:
    type: ConditionType
    config: NodeConfig


# key in node.data -> (sub-type enum, config registry, record class)
_RECORD_KINDS = {
    NodeType.TRIGGER: ("trigger", TriggerType, TRIGGER_CONFIGS, TriggerRecord),
    NodeType.ACTION: ("action", ActionType, ACTION_CONFIGS, ActionRecord),
    NodeType.CONDITION: ("condition", ConditionType, CONDITION_CONFIGS, ConditionRecord),
}


@dataclass(frozen=True)
class Position:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class NodeData:
    """
    Typed payload of a node.

    Only the record matching the node type is populated: ``trigger`` for TRIGGER
    nodes, ``action`` for ACTION nodes, ``condition`` for CONDITION nodes and
    ``delay`` (seconds) for DELAY nodes.
    """

    label: str = ""
    description: str | None = None
    trigger: TriggerRecord | None = None
    action: ActionRecord | None = None
    condition: ConditionRecord | None = None
    delay: float | None = None


@dataclass(frozen=True)
class WorkflowNode:
    """
    A single node of a workflow graph as produced by the graph editor.

    Attributes:
        id (str): Opaque identifier, unique within the workflow.
        type (NodeType): Variant tag.
        data (NodeData): Label plus the type-specific record.
        connections (tuple[str, ...]): Ordered targets of the outgoing edges.
        position (Position): Canvas coordinates, ignored by validation.
    """

    id: str
    type: NodeType
    data: NodeData = field(default_factory=NodeData)
    connections: tuple[str, ...] = ()
    position: Position = field(default_factory=Position)

    @property
    def display_label(self) -> str:
        return self.data.label.strip() or f"Node {self.id}"

    def record(self) -> TriggerRecord | ActionRecord | ConditionRecord | None:
        """Returns the type-specific record, or None for DELAY/END nodes or when undefined."""
        kind = _RECORD_KINDS.get(self.type)
        if kind is None:
            return None
        return getattr(self.data, kind[0])

    @classmethod
    def from_json(cls, data: dict) -> "WorkflowNode":
        """
        Parses a node from the editor's JSON payload.

        Missing or wrongly-typed configuration fields are tolerated (they are reported
        by the validator). Type-level problems raise InvalidNodeError: a payload that
        is not an object, a missing id, or an unknown node/sub-type tag.
        """
        if not isinstance(data, dict):
            raise InvalidNodeError("?", "node must be a JSON object")

        node_id = data.get("id")
        if not isinstance(node_id, str) or not node_id:
            raise InvalidNodeError(str(node_id), "node id must be a non-empty string")

        try:
            node_type = NodeType(data.get("type"))
        except ValueError:
            raise InvalidNodeError(node_id, f"unknown node type {data.get('type')!r}")

        raw_data = data.get("data")
        if not isinstance(raw_data, dict):
            raw_data = {}

        label = raw_data.get("label")
        description = raw_data.get("description")
        payload = {
            "label": label if isinstance(label, str) else "",
            "description": description if isinstance(description, str) else None,
        }

        kind = _RECORD_KINDS.get(node_type)
        if kind is not None:
            key = kind[0]
            payload[key] = _parse_record(node_id, key, raw_data.get(key), *kind[1:])
        elif node_type == NodeType.DELAY:
            payload["delay"] = _delay_seconds(raw_data.get("delay"))

        connections = data.get("connections")
        if not isinstance(connections, (list, tuple)):
            connections = ()

        raw_position = data.get("position")
        if not isinstance(raw_position, dict):
            raw_position = {}

        return cls(
            id=node_id,
            type=node_type,
            data=NodeData(**payload),
            connections=tuple(target for target in connections if isinstance(target, str)),
            position=Position(
                x=_number(raw_position.get("x")),
                y=_number(raw_position.get("y")),
            ),
        )

    def to_json(self) -> dict:
        data: dict = {"label": self.data.label}
        if self.data.description is not None:
            data["description"] = self.data.description
        record = self.record()
        if record is not None:
            data[_RECORD_KINDS[self.type][0]] = {
                "type": record.type.value,
                "config": record.config.to_json(),
            }
        if self.type == NodeType.DELAY and self.data.delay is not None:
            data["delay"] = self.data.delay

        return {
            "id": self.id,
            "type": self.type.value,
            "position": {"x": self.position.x, "y": self.position.y},
            "data": data,
            "connections": list(self.connections),
        }


def _parse_record(node_id: str, key: str, raw, enum_cls, registry, record_cls):
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise InvalidNodeError(node_id, f"'{key}' must be a JSON object")

    sub_type = raw.get("type")
    if sub_type is None:
        # The editor creates the record before a sub-type is picked.
        return None
    try:
        sub_type = enum_cls(sub_type)
    except ValueError:
        raise InvalidNodeError(node_id, f"unknown {key} type {sub_type!r}")

    return record_cls(type=sub_type, config=registry[sub_type].from_json(raw.get("config")))


def _number(value) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return 0.0


def _delay_seconds(value) -> float | None:
    # The editor stores the delay from a text input, so "30" arrives as a string.
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        return None
    return value


def parse_nodes(payload) -> list[WorkflowNode]:
    """Parses a list of editor nodes, rejecting anything that is not a JSON array."""
    if not isinstance(payload, (list, tuple)):
        raise InvalidWorkflowError("Workflow nodes must be a JSON array")
    return [WorkflowNode.from_json(item) for item in payload]
