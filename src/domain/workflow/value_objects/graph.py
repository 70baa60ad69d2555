from dataclasses import dataclass, field

from src.domain.workflow.entities.node import WorkflowNode


@dataclass
class WorkflowGraph:
    """Directed graph over a node snapshot, with iterative cycle detection and integrity lookups."""

    order: list[str] = field(default_factory=list)
    nodes: dict[str, WorkflowNode] = field(default_factory=dict)
    adjacency: dict[str, tuple[str, ...]] = field(default_factory=dict)
    duplicate_ids: list[str] = field(default_factory=list)

    @classmethod
    def from_nodes(cls, nodes: list[WorkflowNode]) -> "WorkflowGraph":
        """Builds the graph; a repeated id resolves to its first occurrence."""
        graph = cls()
        for node in nodes:
            if node.id in graph.nodes:
                if node.id not in graph.duplicate_ids:
                    graph.duplicate_ids.append(node.id)
                continue
            graph.order.append(node.id)
            graph.nodes[node.id] = node
            graph.adjacency[node.id] = node.connections
        return graph

    def dangling_connections(self) -> list[tuple[WorkflowNode, str]]:
        """(source, target id) pairs whose target is not part of the node set."""
        return [
            (self.nodes[node_id], target)
            for node_id in self.order
            for target in self.adjacency[node_id]
            if target not in self.nodes
        ]

    def has_cycle(self) -> bool:
        """
        Depth-first search from every unvisited node, in input order, with an explicit
        stack and a recursion-stack set. Reaching a node that is still on the current
        path means the graph contains a cycle. Dangling targets are ignored.
        """
        visited: set[str] = set()
        on_path: set[str] = set()

        for root in self.order:
            if root in visited:
                continue

            visited.add(root)
            on_path.add(root)
            stack = [(root, iter(self.adjacency[root]))]

            while stack:
                node_id, successors = stack[-1]
                for target in successors:
                    if target not in self.nodes:
                        continue
                    if target in on_path:
                        return True
                    if target not in visited:
                        visited.add(target)
                        on_path.add(target)
                        stack.append((target, iter(self.adjacency[target])))
                        break
                else:
                    stack.pop()
                    on_path.discard(node_id)

        return False
