"""Graph data model for header include relationships."""

import posixpath
from typing import Dict, Iterable, Iterator, List, Optional


class HeaderNode:
    """
    A header file on disk, or an include target that could not be resolved.

    Nodes live in an IncludeGraph arena and are identified by their index.
    Children map the raw include string to the index of the included node,
    in the order the includes were added.
    """

    def __init__(
        self,
        index: int,
        path: str,
        relative_dir: str = "",
        is_root: bool = False,
        is_unresolved: bool = False,
    ):
        self.index = index
        self.path = path
        self.relative_dir = relative_dir
        self.is_root = is_root
        self.is_unresolved = is_unresolved
        self.children: Dict[str, int] = {}

    @property
    def file_name(self) -> str:
        """Return the last path component (works for both / and \\ separators)."""
        return posixpath.basename(self.path.replace("\\", "/"))

    @property
    def relative_path(self) -> str:
        """Return the path relative to the scan root with forward slashes."""
        if not self.relative_dir:
            return self.file_name
        return f"{self.relative_dir}/{self.file_name}"

    def __str__(self) -> str:
        return self.relative_path

    def __repr__(self) -> str:
        kind = "root" if self.is_root else "unresolved" if self.is_unresolved else "file"
        return f"HeaderNode({self.index}, {self.path!r}, {kind}, children={len(self.children)})"


class IncludeGraph:
    """
    A directed graph of headers connected by 'includes' edges.

    Every node is stored once in an arena list. A registry maps absolute
    paths (or raw text for unresolved targets) to arena indices, so two
    edges pointing at the same file always share one node. Top-level
    entries are kept in insertion order; once the graph is finalized the
    survivors become the children of a synthetic root node.
    """

    def __init__(self, scan_root: str):
        self.scan_root = scan_root
        self._nodes: List[HeaderNode] = []
        self._registry: Dict[str, int] = {}
        self._top_level: Dict[str, int] = {}
        self._root: Optional[HeaderNode] = None

    @property
    def root(self) -> HeaderNode:
        """Return the synthetic root. Only available after finalize_root()."""
        if self._root is None:
            raise RuntimeError("graph has not been finalized")
        return self._root

    @property
    def is_finalized(self) -> bool:
        return self._root is not None

    def add_file(self, path: str, relative_dir: str) -> HeaderNode:
        """
        Register a scanned header file.

        Args:
            path: Absolute path of the header.
            relative_dir: Directory of the header relative to the scan root.

        Returns:
            The registered node (the existing one if already present).
        """
        return self._register(path, relative_dir, is_unresolved=False)

    def add_unresolved(self, key: str) -> HeaderNode:
        """
        Register a leaf for an include target that has no scanned file.

        Args:
            key: Raw include text, or the absolute path of a file that
                exists on disk but was not scanned.

        Returns:
            The registered leaf node (the existing one if already present).
        """
        return self._register(key, "", is_unresolved=True)

    def _register(self, key: str, relative_dir: str, is_unresolved: bool) -> HeaderNode:
        self._check_mutable()
        index = self._registry.get(key)
        if index is not None:
            return self._nodes[index]
        node = HeaderNode(
            index=len(self._nodes),
            path=key,
            relative_dir=relative_dir,
            is_unresolved=is_unresolved,
        )
        self._nodes.append(node)
        self._registry[key] = node.index
        self._top_level[key] = node.index
        return node

    def get(self, key: str) -> Optional[HeaderNode]:
        """Look up a node by absolute path or raw unresolved text."""
        index = self._registry.get(key)
        if index is None:
            return None
        return self._nodes[index]

    def node(self, index: int) -> HeaderNode:
        """Return the node stored at an arena index."""
        return self._nodes[index]

    def add_edge(self, source: HeaderNode, include: str, target: HeaderNode) -> bool:
        """
        Add a directed 'includes' edge from source to target.

        Args:
            source: The including node.
            include: The raw include string that produced the edge.
            target: The included node.

        Returns:
            False if source already has an edge for this include string.
        """
        self._check_mutable()
        if include in source.children:
            return False
        source.children[include] = target.index
        return True

    def children(self, node: HeaderNode) -> List[HeaderNode]:
        """Return the direct children of a node in include order."""
        return [self._nodes[index] for index in node.children.values()]

    def finalize_root(self, not_root: Iterable[str]) -> HeaderNode:
        """
        Remove included entries from the top level and build the synthetic root.

        Args:
            not_root: Registry keys of every node that was the target of an edge.

        Returns:
            The synthetic root node.
        """
        self._check_mutable()
        for key in not_root:
            self._top_level.pop(key, None)

        root = HeaderNode(index=len(self._nodes), path="", is_root=True)
        for key, index in self._top_level.items():
            root.children[key] = index
        self._nodes.append(root)
        self._root = root
        return root

    def iter_nodes(self) -> Iterator[HeaderNode]:
        """Iterate over all non-root nodes in creation order."""
        for node in self._nodes:
            if not node.is_root:
                yield node

    def edge_count(self) -> int:
        return sum(len(node.children) for node in self.iter_nodes())

    def _check_mutable(self) -> None:
        if self._root is not None:
            raise RuntimeError("graph is finalized and can no longer be modified")

    def __len__(self) -> int:
        """Return the number of non-root nodes in the graph."""
        return sum(1 for _ in self.iter_nodes())

    def __contains__(self, key: str) -> bool:
        return key in self._registry

    def __repr__(self) -> str:
        unresolved = sum(1 for node in self.iter_nodes() if node.is_unresolved)
        return f"IncludeGraph(nodes={len(self)}, edges={self.edge_count()}, unresolved={unresolved})"
