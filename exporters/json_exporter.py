"""JSON exporter for redundant include reports (machine-friendly format)."""

import json
from typing import Any, Dict, List

from graph.duplicates import RedundantIncludes
from .text_exporter import display_name


def to_json(
    reports: List[RedundantIncludes],
    root: str,
    indent: int = 2,
) -> str:
    """
    Convert redundant include findings to JSON format.

    Args:
        reports: Findings in report order.
        root: Scan root, recorded in the output.
        indent: JSON indentation level.

    Returns:
        JSON string representation of the findings.
    """
    files: List[Dict[str, Any]] = []
    for report in reports:
        redundant: List[Dict[str, Any]] = []
        for include, child in zip(report.includes, report.redundant):
            redundant.append({
                "include": include,
                "path": display_name(report.node, child),
                "unresolved": child.is_unresolved,
            })
        files.append({
            "file": report.node.relative_path,
            "path": report.node.path,
            "redundant": redundant,
        })

    data: Dict[str, Any] = {
        "root": root,
        "files": files,
    }

    return json.dumps(data, indent=indent)
