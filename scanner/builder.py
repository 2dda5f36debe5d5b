"""Graph builder that orchestrates header scanning and graph construction."""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Set, Tuple

from errors import CircularDependencyError, ScanRootError
from graph.cycles import find_cycle
from graph.model import HeaderNode, IncludeGraph
from .discovery import iter_headers, get_relative_dir, normalize_dir
from .parser import read_includes
from .resolver import resolve_include, lookup_node, search_dirs_for

logger = logging.getLogger(__name__)


# raw include text and its resolved absolute path (None when unresolved)
IncludeRef = Tuple[str, Optional[str]]


def build_graph(
    root: Path,
    include_dirs: Sequence[str] = (),
    exclude_dirs: Sequence[str] = (),
    extensions: Optional[Set[str]] = None,
) -> IncludeGraph:
    """
    Scan a source tree and build an acyclic include graph.

    Args:
        root: Directory to scan.
        include_dirs: Include search directories relative to root, in order.
        exclude_dirs: Relative directory prefixes whose headers are skipped.
        extensions: Header extensions to scan (default: .h).

    Returns:
        A finalized IncludeGraph whose root owns every header that no other
        scanned header includes.

    Raises:
        ScanRootError: If root is not a directory.
        CircularDependencyError: As soon as an include closes a cycle.
    """
    root = Path(root)
    if not root.is_dir():
        raise ScanRootError(str(root))
    root = root.resolve()
    scan_root = str(root)
    include_dirs = [normalize_dir(d) for d in include_dirs if d]

    graph = IncludeGraph(scan_root)
    relations: Dict[str, List[IncludeRef]] = {}

    # First pass: register every header and resolve its includes
    for file_path in iter_headers(root, extensions=extensions, exclude_dirs=exclude_dirs):
        relative_dir = get_relative_dir(file_path, root)
        search_dirs = search_dirs_for(include_dirs, relative_dir)

        refs: List[IncludeRef] = []
        for include in read_includes(file_path):
            resolved = resolve_include(include, scan_root, search_dirs)
            if resolved is None:
                logger.debug("Unresolved include %r in %s", include, file_path)
            refs.append((include, resolved))

        graph.add_file(str(file_path), relative_dir)
        relations[str(file_path)] = refs
        logger.debug("Scanned %s (%d includes)", file_path, len(refs))

    # Second pass: wire edges, checking for cycles after each one
    not_root: Set[str] = set()
    for file_path, refs in relations.items():
        source = graph.get(file_path)
        search_dirs = search_dirs_for(include_dirs, source.relative_dir)

        for include, resolved in refs:
            target = _find_target(graph, include, resolved, scan_root, search_dirs)

            if not graph.add_edge(source, include, target):
                logger.warning("Repeated include %r in %s", include, source.relative_path)
                continue

            if find_cycle(graph, source):
                raise CircularDependencyError(source.relative_path, target.relative_path)

            not_root.add(target.path)

    graph.finalize_root(not_root)

    unresolved = sum(1 for node in graph.iter_nodes() if node.is_unresolved)
    logger.info(
        "Built include graph: %d headers, %d includes, %d unresolved",
        len(relations),
        graph.edge_count(),
        unresolved,
    )
    return graph


def _find_target(
    graph: IncludeGraph,
    include: str,
    resolved: Optional[str],
    scan_root: str,
    search_dirs: List[str],
) -> HeaderNode:
    """Find or create the node an include refers to."""
    if resolved is not None:
        node = graph.get(resolved)
        if node is not None:
            return node
        # exists on disk but was never scanned (excluded or not a header extension)
        return graph.add_unresolved(resolved)

    node = lookup_node(graph, include, scan_root, search_dirs)
    if node is not None:
        return node
    return graph.add_unresolved(include)
