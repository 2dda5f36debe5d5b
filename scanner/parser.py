"""Extraction of raw include targets from C/C++ header text."""

import re
from pathlib import Path
from typing import List


# One match per line: `#include <path>` or `#include "path"`
INCLUDE_PATTERN = re.compile(
    r"""^[ \t]*\#[ \t]*include[ \t]*[<"](?P<path>[^>"\r\n]+)[>"]""",
    re.MULTILINE,
)


def extract_includes(text: str) -> List[str]:
    """
    Extract raw include targets from header source text.

    Args:
        text: Contents of a header file.

    Returns:
        Include targets in file order, duplicates preserved.
    """
    return [match.group("path").strip() for match in INCLUDE_PATTERN.finditer(text)]


def read_includes(file_path: Path) -> List[str]:
    """
    Read a header file and extract its include targets.

    Undecodable bytes are replaced rather than rejected, since headers in
    legacy code bases are often not UTF-8. I/O errors propagate.

    Args:
        file_path: Path to the header file.

    Returns:
        Include targets in file order.
    """
    content = file_path.read_text(encoding="utf-8", errors="replace")
    return extract_includes(content)
