"""Detection of redundant direct includes."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Tuple

from .model import HeaderNode, IncludeGraph


ReportCallback = Callable[[HeaderNode, List[HeaderNode]], None]


@dataclass
class RedundantIncludes:
    """Direct includes of a node that are already reachable through a sibling."""

    node: HeaderNode
    redundant: List[HeaderNode] = field(default_factory=list)
    includes: List[str] = field(default_factory=list)


def scan(graph: IncludeGraph, report: ReportCallback) -> None:
    """
    Report every node whose direct includes are transitively redundant.

    Performs a memoized post-order traversal from the synthetic root, using
    an explicit stack so deep include chains do not hit the recursion limit.
    Each node is evaluated once no matter how many parents include it, so
    the callback fires at most once per node. The root itself is never
    reported.

    Args:
        graph: A finalized include graph.
        report: Called with (node, redundant_children) for each finding.
    """
    memo: Dict[int, List[int]] = {}
    root = graph.root

    # (index, children_done); children are pushed reversed to keep include order
    stack: List[Tuple[int, bool]] = [(index, False) for index in reversed(list(root.children.values()))]
    while stack:
        index, children_done = stack.pop()
        if index in memo:
            continue
        node = graph.node(index)
        if children_done:
            memo[index] = _evaluate(graph, node, report, memo)
            continue
        stack.append((index, True))
        for child in reversed(list(node.children.values())):
            if child not in memo:
                stack.append((child, False))


def _evaluate(
    graph: IncludeGraph,
    node: HeaderNode,
    report: ReportCallback,
    memo: Dict[int, List[int]],
) -> List[int]:
    """Return the distinct indices reachable from node; its children are memoized."""
    direct = list(node.children.values())
    combined: Counter = Counter(direct)
    for index in direct:
        combined.update(memo[index])

    found: List[int] = []
    for index in dict.fromkeys(direct):
        if combined[index] > 1:
            found.append(index)

    if found:
        report(node, [graph.node(index) for index in found])

    excluded = set(found)
    return [index for index in combined if index not in excluded]


def find_redundant_includes(graph: IncludeGraph) -> List[RedundantIncludes]:
    """
    Collect all redundant include findings in report order.

    Args:
        graph: A finalized include graph.

    Returns:
        One RedundantIncludes entry per reported node.
    """
    results: List[RedundantIncludes] = []

    def collect(node: HeaderNode, redundant: List[HeaderNode]) -> None:
        raw_by_index: Dict[int, str] = {}
        for raw, index in node.children.items():
            raw_by_index.setdefault(index, raw)
        includes = [raw_by_index[child.index] for child in redundant]
        results.append(RedundantIncludes(node=node, redundant=list(redundant), includes=includes))

    scan(graph, collect)
    return results
