"""Include graph model, cycle detection and redundant include analysis."""

from .model import HeaderNode, IncludeGraph
from .cycles import find_cycle
from .duplicates import RedundantIncludes, scan, find_redundant_includes

__all__ = [
    "HeaderNode",
    "IncludeGraph",
    "find_cycle",
    "RedundantIncludes",
    "scan",
    "find_redundant_includes",
]
