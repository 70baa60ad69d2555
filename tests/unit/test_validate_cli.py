import json

from scripts.validate_workflow import EXIT_BAD_INPUT, EXIT_INVALID, EXIT_VALID, main
from tests.node_factory import keyword_trigger, send_message, simple_workflow


def write(tmp_path, payload):
    path = tmp_path / "workflow.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_valid_workflow(tmp_path, capsys):
    assert main([write(tmp_path, simple_workflow())]) == EXIT_VALID

    out = capsys.readouterr().out
    assert out.startswith("VALID - 1 trigger(s)")


def test_accepts_wrapped_nodes(tmp_path, capsys):
    path = write(tmp_path, {"nodes": [keyword_trigger(connections=["a1"]), send_message()]})

    assert main([path, "--json"]) == EXIT_VALID

    verdict = json.loads(capsys.readouterr().out)
    assert verdict["warnings"] == ["Action node has no outgoing connections"]


def test_strict_fails_on_warnings(tmp_path):
    path = write(tmp_path, [keyword_trigger(connections=["a1"]), send_message()])

    assert main([path, "--strict"]) == EXIT_INVALID


def test_invalid_workflow(tmp_path, capsys):
    assert main([write(tmp_path, [keyword_trigger(keywords=[])])]) == EXIT_INVALID

    out = capsys.readouterr().out
    assert out.startswith("INVALID")
    assert "error:   Trigger: keywords not configured" in out


def test_malformed_input(tmp_path, capsys):
    assert main([write(tmp_path, [{"id": "x", "type": "loop"}])]) == EXIT_BAD_INPUT
    assert "unknown node type" in capsys.readouterr().err


def test_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.json")]) == EXIT_BAD_INPUT
