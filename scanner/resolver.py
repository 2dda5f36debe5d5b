"""Path resolution for mapping raw include targets to header files."""

import os
from typing import Iterable, List, Optional, Sequence

from graph.model import HeaderNode, IncludeGraph


def search_dirs_for(include_dirs: Sequence[str], relative_dir: str) -> List[str]:
    """
    Build the search directory list for an including file.

    Configured include directories come first, the includer's own
    directory last.
    """
    return list(include_dirs) + [relative_dir]


def resolve_include(
    include: str,
    scan_root: str,
    search_dirs: Iterable[str],
) -> Optional[str]:
    """
    Resolve a raw include target to an existing file on disk.

    Tries, in order:
    1. The target relative to the scan root.
    2. The target under each search directory (relative to the scan root).

    Args:
        include: The raw include string, e.g. 'util/log.h'.
        scan_root: Absolute path of the scan root.
        search_dirs: Ordered search directories relative to the scan root.

    Returns:
        Normalized absolute path if a file exists, None otherwise.
    """
    if not include:
        return None

    for candidate in _candidates(include, scan_root, search_dirs):
        if os.path.isfile(candidate):
            return candidate

    return None


def lookup_node(
    graph: IncludeGraph,
    include: str,
    scan_root: str,
    search_dirs: Iterable[str],
) -> Optional[HeaderNode]:
    """
    Find an already registered node for a raw include target.

    Unlike resolve_include this never touches the file system. It tries
    the raw text itself as a registry key first (absolute paths and
    previously created unresolved leaves), then the same candidates
    resolve_include would build.

    Args:
        graph: The graph being built.
        include: The raw include string.
        scan_root: Absolute path of the scan root.
        search_dirs: Ordered search directories relative to the scan root.

    Returns:
        The registered node, or None if no candidate is registered.
    """
    node = graph.get(include)
    if node is not None:
        return node

    for candidate in _candidates(include, scan_root, search_dirs):
        node = graph.get(candidate)
        if node is not None:
            return node

    return None


def _candidates(include: str, scan_root: str, search_dirs: Iterable[str]) -> List[str]:
    normalized = include.replace("\\", "/")
    candidates = [os.path.normpath(os.path.join(scan_root, normalized))]
    for search_dir in search_dirs:
        candidates.append(os.path.normpath(os.path.join(scan_root, search_dir, normalized)))
    return candidates
