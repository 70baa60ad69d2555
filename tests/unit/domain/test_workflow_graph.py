from src.domain.workflow.entities.node import parse_nodes
from src.domain.workflow.value_objects.graph import WorkflowGraph
from tests.node_factory import end, keyword_trigger, send_message


def build(payload):
    return WorkflowGraph.from_nodes(parse_nodes(payload))


def test_chain_has_no_cycle():
    graph = build([keyword_trigger(connections=["a1"]), send_message(connections=["end"]), end()])

    assert not graph.has_cycle()


def test_back_edge_is_a_cycle():
    graph = build([
        keyword_trigger(connections=["a1"]),
        send_message("a1", connections=["a2"]),
        send_message("a2", connections=["a1"]),
    ])

    assert graph.has_cycle()


def test_cycle_found_from_later_root():
    graph = build([
        end("e1"),
        send_message("a1", connections=["a2"]),
        send_message("a2", connections=["a3"]),
        send_message("a3", connections=["a2"]),
    ])

    assert graph.has_cycle()


def test_long_chain_does_not_exhaust_the_stack():
    size = 5000
    payload = [
        send_message(f"n{i}", connections=[f"n{i + 1}"] if i + 1 < size else [])
        for i in range(size)
    ]

    assert not build(payload).has_cycle()


def test_dangling_targets_are_ignored_by_cycle_detection():
    graph = build([keyword_trigger(connections=["ghost"])])

    assert not graph.has_cycle()
    assert [(source.id, target) for source, target in graph.dangling_connections()] == [("t1", "ghost")]


def test_first_occurrence_wins_for_duplicate_ids():
    graph = build([
        send_message("a1", label="First", connections=["end"]),
        send_message("a1", label="Second", connections=["a1"]),
        end(),
    ])

    assert graph.duplicate_ids == ["a1"]
    assert graph.nodes["a1"].data.label == "First"
    assert not graph.has_cycle()
