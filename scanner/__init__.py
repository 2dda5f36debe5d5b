"""Scanner module for header discovery, include extraction and graph building."""

from .discovery import iter_headers
from .parser import extract_includes, read_includes
from .resolver import resolve_include, lookup_node
from .builder import build_graph

__all__ = [
    "iter_headers",
    "extract_includes",
    "read_includes",
    "resolve_include",
    "lookup_node",
    "build_graph",
]
