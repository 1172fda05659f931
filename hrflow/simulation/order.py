"""Execution order resolution for workflows."""

from ..graph.builder import build_graph
from ..graph.workflow_graph import WorkflowGraph
from ..schema.models import Node, Workflow


def resolve_order(workflow: Workflow) -> list[Node]:
    """Compute the order in which a simulated run visits the nodes.

    Depth-first pre-order from each start node in collection order,
    following edges in declaration order. A node reached along several
    paths appears once, where it is first discovered. Nodes not reachable
    from any start node are appended in collection order.

    Without a start node every node is returned in collection order.

    Args:
        workflow: The workflow to order.

    Returns:
        The nodes in visiting order.
    """
    graph = build_graph(workflow)
    start_nodes = graph.get_start_nodes()

    if not start_nodes:
        return list(workflow.nodes)

    visited: set[str] = set()
    order: list[Node] = []

    for start in start_nodes:
        _visit(graph, start, visited, order)

    for node in workflow.nodes:
        if node.id not in visited:
            visited.add(node.id)
            order.append(node)

    return order


def _visit(
    graph: WorkflowGraph, root: Node, visited: set[str], order: list[Node]
) -> None:
    """Pre-order walk from root using an explicit stack of successor iterators."""
    if root.id in visited:
        return

    visited.add(root.id)
    order.append(root)
    stack = [iter(graph.get_successors(root.id))]

    while stack:
        for target in stack[-1]:
            if target in visited:
                continue
            visited.add(target)
            node = graph.get_node(target)
            if node is None:
                # Dangling edge target
                continue
            order.append(node)
            stack.append(iter(graph.get_successors(target)))
            break
        else:
            stack.pop()
