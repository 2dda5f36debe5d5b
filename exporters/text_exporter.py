"""Plain text exporter for redundant include reports (console format)."""

from typing import List

from graph.duplicates import RedundantIncludes
from graph.model import HeaderNode


def to_text(reports: List[RedundantIncludes]) -> str:
    """
    Convert redundant include findings to the console report format.

    Each finding is printed as the including file's path followed by one
    ' - <include>' line per redundant include and a blank line.

    Args:
        reports: Findings in report order.

    Returns:
        The report text, or an empty string if nothing was found.
    """
    lines: List[str] = []
    for report in reports:
        lines.append(report.node.path)
        for child in report.redundant:
            lines.append(f" - {display_name(report.node, child)}")
        lines.append("")

    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def display_name(parent: HeaderNode, child: HeaderNode) -> str:
    """
    Get how a redundant include is shown relative to its includer.

    Args:
        parent: The including node.
        child: The redundant included node.

    Returns:
        The bare file name when both share a directory, the raw text for
        nodes without a relative directory, else the root-relative path.
    """
    if parent.relative_dir == child.relative_dir:
        return child.file_name
    if not child.relative_dir:
        return child.path
    return child.relative_path.replace("\\", "/")
