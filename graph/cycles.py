"""Incremental cycle detection for the include graph."""

from collections import deque
from typing import Deque, Set

from .model import HeaderNode, IncludeGraph


def find_cycle(graph: IncludeGraph, node: HeaderNode) -> bool:
    """
    Check whether a node can reach itself through its own children.

    Runs a breadth-first search from the node's current children. Called
    after every edge insertion, so the graph was acyclic before the new
    edge and any cycle found must pass through it.

    Args:
        graph: The graph being built.
        node: Source of the edge that was just inserted.

    Returns:
        True if the node is reachable from one of its children.
    """
    queue: Deque[int] = deque(node.children.values())
    visited: Set[int] = set()

    while queue:
        index = queue.popleft()
        if index == node.index:
            return True
        if index in visited:
            continue
        visited.add(index)
        queue.extend(graph.node(index).children.values())

    return False
