"""Builders for editor node payloads used across the test suite."""


def make_node(node_id, node_type, label="", connections=(), **data):
    return {
        "id": node_id,
        "type": node_type,
        "position": {"x": 0, "y": 0},
        "data": {"label": label, **data},
        "connections": list(connections),
    }


def keyword_trigger(node_id="t1", keywords=("price",), label="Trigger", connections=()):
    return make_node(
        node_id,
        "trigger",
        label,
        connections,
        trigger={"type": "keyword", "config": {"keywords": list(keywords)}},
    )


def send_message(node_id="a1", message="Hi", label="Action node", connections=()):
    return make_node(
        node_id,
        "action",
        label,
        connections,
        action={"type": "send_message", "config": {"message": message}},
    )


def text_condition(node_id="c1", text="yes", label="Check", connections=()):
    return make_node(
        node_id,
        "condition",
        label,
        connections,
        condition={"type": "text_contains", "config": {"text": text}},
    )


def delay(node_id="d1", seconds=60, label="Wait", connections=()):
    return make_node(node_id, "delay", label, connections, delay=seconds)


def end(node_id="end", label="End"):
    return make_node(node_id, "end", label)


def simple_workflow():
    """Trigger -> send message -> end, valid without warnings."""
    return [
        keyword_trigger(connections=["a1"]),
        send_message(connections=["end"]),
        end(),
    ]
