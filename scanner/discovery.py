"""Header file discovery for scanning source trees."""

from pathlib import Path
from typing import Iterable, Iterator, Optional, Set


DEFAULT_EXTENSIONS = {".h"}
DEFAULT_SKIP_DIRS = {".git", ".hg", ".svn"}


def iter_headers(
    root: Path,
    extensions: Optional[Set[str]] = None,
    exclude_dirs: Iterable[str] = (),
) -> Iterator[Path]:
    """
    Iterate over header files in a directory tree, in sorted order.

    Args:
        root: Root directory to scan.
        extensions: Set of file extensions to include (e.g., {'.h', '.hpp'}).
                    If None, uses DEFAULT_EXTENSIONS.
        exclude_dirs: Relative directory prefixes to skip. A file is skipped
                      when its root-relative directory starts with any of them.

    Yields:
        Path objects for matching files.
    """
    if extensions is None:
        extensions = DEFAULT_EXTENSIONS
    prefixes = tuple(p for p in (normalize_dir(prefix) for prefix in exclude_dirs) if p)

    root = root.resolve()

    def _walk(current: Path) -> Iterator[Path]:
        relative_dir = get_relative_dir(current / "_", root)
        if prefixes and relative_dir.startswith(prefixes):
            # every file below shares this prefix
            return

        for entry in sorted(current.iterdir()):
            if entry.is_dir():
                if entry.name in DEFAULT_SKIP_DIRS:
                    continue
                yield from _walk(entry)
            elif entry.is_file():
                if entry.suffix.lower() in extensions:
                    yield entry

    yield from _walk(root)


def get_relative_dir(file_path: Path, root: Path) -> str:
    """
    Get the directory of a file relative to root, with forward slashes.

    Returns an empty string for files directly under root.
    """
    relative = file_path.relative_to(root)
    parent = relative.parent.as_posix()
    return "" if parent == "." else parent


def normalize_dir(value: str) -> str:
    """Normalize a user supplied relative directory to forward slashes."""
    cleaned = value.strip().replace("\\", "/")
    while cleaned.startswith("./"):
        cleaned = cleaned[2:]
    return cleaned.rstrip("/")
