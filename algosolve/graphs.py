"""Undirected graphs: cloning and shortest walks that visit every node."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(eq=False)
class GraphNode:
    """A graph node with a value and an ordered list of neighbours."""

    val: int = 0
    neighbors: list[GraphNode] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"GraphNode({self.val}, neighbors={[n.val for n in self.neighbors]})"


def build_graph(adjacency: Sequence[Sequence[int]]) -> GraphNode | None:
    """Build a graph whose node i+1 has the neighbours listed at adjacency[i]; return node 1."""
    nodes = [GraphNode(i + 1) for i in range(len(adjacency))]
    for node, neighbours in zip(nodes, adjacency):
        for value in neighbours:
            if not 1 <= value <= len(nodes):
                raise ValueError(f"neighbour {value} is not a node of the graph")
            node.neighbors.append(nodes[value - 1])
    return nodes[0] if nodes else None


def clone_graph(node: GraphNode | None) -> GraphNode | None:
    """Return a deep copy of the graph reachable from node, nodes identified by value."""
    if node is None:
        return None
    clones = {node.val: GraphNode(node.val)}
    pending: deque[GraphNode] = deque([node])
    while pending:
        original = pending.popleft()
        copy = clones[original.val]
        for neighbour in original.neighbors:
            if neighbour.val not in clones:
                clones[neighbour.val] = GraphNode(neighbour.val)
                pending.append(neighbour)
            copy.neighbors.append(clones[neighbour.val])
    return clones[node.val]


def shortest_path_length(graph: Sequence[Sequence[int]]) -> int:
    """Return the length of the shortest walk visiting every node, or -1 if none exists."""
    n = len(graph)
    everything = (1 << n) - 1
    queue: deque[tuple[int, int]] = deque((i, 1 << i) for i in range(n))
    seen: set[tuple[int, int]] = set()
    steps = 0
    while queue:
        for _ in range(len(queue)):
            node, state = queue.popleft()
            if state == everything:
                return steps
            if (node, state) in seen:
                continue
            seen.add((node, state))
            for nxt in graph[node]:
                queue.append((nxt, state | (1 << nxt)))
        steps += 1
    return -1