import pytest

from src.domain.workflow.entities.node import WorkflowNode, parse_nodes
from src.domain.workflow.exceptions import InvalidNodeError, InvalidWorkflowError
from src.domain.workflow.value_objects.node_config import (
    KeywordTriggerConfig,
    WebhookActionConfig,
)
from src.domain.workflow.value_objects.node_type import ActionType, NodeType, TriggerType
from tests.node_factory import delay, keyword_trigger, make_node, send_message


def test_parse_keyword_trigger():
    node = WorkflowNode.from_json(
        make_node(
            "t1",
            "trigger",
            "Keyword: price",
            ["a1"],
            trigger={
                "type": "keyword",
                "config": {"keywords": ["price", "cost"], "caseSensitive": True},
            },
        )
    )

    assert node.type == NodeType.TRIGGER
    assert node.connections == ("a1",)
    assert node.record().type == TriggerType.KEYWORD
    assert node.record().config == KeywordTriggerConfig(keywords=("price", "cost"), case_sensitive=True)


def test_parse_webhook_action_camel_case_fields():
    node = WorkflowNode.from_json(
        make_node(
            "a1",
            "action",
            "Notify CRM",
            action={
                "type": "webhook",
                "config": {
                    "webhookUrl": "https://crm.example.com/hook",
                    "webhookMethod": "POST",
                    "webhookHeaders": {"X-Token": "abc"},
                },
            },
        )
    )

    config = node.record().config
    assert node.record().type == ActionType.WEBHOOK
    assert isinstance(config, WebhookActionConfig)
    assert config.webhook_url == "https://crm.example.com/hook"
    assert config.webhook_headers == {"X-Token": "abc"}
    assert config.issues() == []


def test_wrongly_typed_fields_degrade_to_missing():
    node = WorkflowNode.from_json(
        make_node("t1", "trigger", trigger={"type": "keyword", "config": {"keywords": "price"}})
    )

    assert node.record().config.keywords == ()
    assert node.record().config.issues() == ["keywords not configured"]


def test_record_without_sub_type_is_undefined():
    node = WorkflowNode.from_json(make_node("a1", "action", action={"config": {"message": "Hi"}}))

    assert node.record() is None


def test_unknown_node_type_is_rejected():
    with pytest.raises(InvalidNodeError) as exc_info:
        WorkflowNode.from_json(make_node("x1", "loop"))

    assert exc_info.value.node_id == "x1"
    assert exc_info.value.error_code == "INVALID_NODE"


def test_unknown_sub_type_is_rejected():
    with pytest.raises(InvalidNodeError):
        WorkflowNode.from_json(make_node("a1", "action", action={"type": "send_fax", "config": {}}))


def test_record_must_be_an_object():
    with pytest.raises(InvalidNodeError):
        WorkflowNode.from_json(make_node("a1", "action", action="send_message"))


def test_missing_id_is_rejected():
    payload = send_message()
    del payload["id"]

    with pytest.raises(InvalidNodeError):
        WorkflowNode.from_json(payload)


def test_non_object_node_is_rejected():
    with pytest.raises(InvalidNodeError):
        parse_nodes(["not-a-node"])


def test_nodes_must_be_a_list():
    with pytest.raises(InvalidWorkflowError):
        parse_nodes({"nodes": []})


def test_delay_accepts_numeric_strings():
    assert WorkflowNode.from_json(delay(seconds="60")).data.delay == 60.0
    assert WorkflowNode.from_json(delay(seconds=" 1.5 ")).data.delay == 1.5


def test_delay_ignores_non_numeric_values():
    assert WorkflowNode.from_json(delay(seconds="abc")).data.delay is None
    assert WorkflowNode.from_json(delay(seconds="nan")).data.delay is None
    assert WorkflowNode.from_json(delay(seconds=True)).data.delay is None
    assert WorkflowNode.from_json(delay(seconds=2.5)).data.delay == 2.5


def test_non_string_connections_are_dropped():
    payload = keyword_trigger(connections=["a1"])
    payload["connections"].append(7)

    assert WorkflowNode.from_json(payload).connections == ("a1",)


def test_missing_optional_parts_use_defaults():
    node = WorkflowNode.from_json({"id": "e1", "type": "end"})

    assert node.data.label == ""
    assert node.connections == ()
    assert node.position.x == 0.0
    assert node.display_label == "Node e1"


def test_to_json_keeps_editor_shape():
    payload = keyword_trigger(connections=["a1"])
    payload["data"]["trigger"]["config"]["caseSensitive"] = False

    assert WorkflowNode.from_json(payload).to_json() == {
        "id": "t1",
        "type": "trigger",
        "position": {"x": 0.0, "y": 0.0},
        "data": {
            "label": "Trigger",
            "trigger": {
                "type": "keyword",
                "config": {"keywords": ["price"], "caseSensitive": False},
            },
        },
        "connections": ["a1"],
    }


def test_node_type_display_names():
    assert [t.display_name for t in NodeType] == ["Trigger", "Condition", "Action", "Delay", "End"]
