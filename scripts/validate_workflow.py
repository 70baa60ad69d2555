"""
Validate an exported workflow graph from the command line.

    python scripts/validate_workflow.py workflow.json
    cat workflow.json | python scripts/validate_workflow.py -

The file holds either the editor's node array or an object with a "nodes" key.
Exit codes: 0 valid, 1 invalid, 2 unreadable or malformed input.
"""
import argparse
import json
import sys

from src.application.workflow.save_gate import WorkflowSaveGate
from src.domain.workflow.entities.node import parse_nodes
from src.domain.workflow.exceptions import WorkflowException
from src.domain.workflow.services.workflow_validator import generate_workflow_summary

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_BAD_INPUT = 2


def load_payload(source: str):
    if source == "-":
        payload = json.load(sys.stdin)
    else:
        with open(source, encoding="utf-8") as fh:
            payload = json.load(fh)
    if isinstance(payload, dict):
        return payload.get("nodes", [])
    return payload


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate a WhatsApp automation workflow graph.")
    parser.add_argument("source", help="path to a workflow JSON file, or - for stdin")
    parser.add_argument("--json", action="store_true", dest="as_json", help="print the verdict as JSON")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="treat warnings as failures",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        nodes = parse_nodes(load_payload(args.source))
        result = WorkflowSaveGate().validate(nodes)
    except (OSError, json.JSONDecodeError) as e:
        print(f"error: cannot read {args.source}: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except WorkflowException as e:
        print(f"error: {e.message}", file=sys.stderr)
        return EXIT_BAD_INPUT

    failed = not result.is_valid or (args.strict and bool(result.warnings))

    if args.as_json:
        print(json.dumps({**result.to_dict(), "summary": generate_workflow_summary(nodes)}, indent=2))
    else:
        print("VALID" if result.is_valid else "INVALID", "-", generate_workflow_summary(nodes))
        for error in result.errors:
            print(f"  error:   {error}")
        for warning in result.warnings:
            print(f"  warning: {warning}")

    return EXIT_INVALID if failed else EXIT_VALID


if __name__ == "__main__":
    sys.exit(main())
