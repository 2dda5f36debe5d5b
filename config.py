"""Configuration loading for header-cleaner.

Settings are merged in priority order:
    1. Defaults (defined in CleanerConfig)
    2. Config file (--config, or .header-cleaner.yaml in the scan root)
    3. CLI overrides

Example config file::

    include_dirs:
      - include
      - third_party/include
    exclude_dirs: build|generated
    extensions: [.h, .hpp]
    format: text
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from errors import ConfigError

logger = logging.getLogger(__name__)


CONFIG_FILENAME = ".header-cleaner.yaml"
LIST_DELIMITER = "|"
OUTPUT_FORMATS = ("text", "json")

_KNOWN_KEYS = {"include_dirs", "exclude_dirs", "extensions", "format"}


@dataclass(frozen=True)
class CleanerConfig:
    """Settings for a single analysis run."""

    include_dirs: Tuple[str, ...] = ()
    exclude_dirs: Tuple[str, ...] = ()
    extensions: Tuple[str, ...] = (".h",)
    output_format: str = "text"

    def merge(self, **overrides: Any) -> "CleanerConfig":
        """Return a copy with every non-None override applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        if "extensions" in values:
            values["extensions"] = normalize_extensions(values["extensions"])
            if not values["extensions"]:
                raise ConfigError("at least one header extension is required")
        if "output_format" in values:
            _check_format(values["output_format"])
        return replace(self, **values)


def split_list(value: Any) -> Tuple[str, ...]:
    """
    Turn a delimited string or a list of strings into a tuple of entries.

    Each string may itself hold several '|'-separated entries. Empty
    entries are dropped.
    """
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        raise ConfigError(f"expected a list or '{LIST_DELIMITER}'-delimited string, got {value!r}")
    entries = []
    for item in value:
        for part in str(item).split(LIST_DELIMITER):
            part = part.strip()
            if part:
                entries.append(part)
    return tuple(entries)


def normalize_extensions(extensions: Any) -> Tuple[str, ...]:
    """Lower-case extensions and make sure each has a leading dot."""
    normalized = []
    for ext in split_list(extensions):
        ext = ext.lower()
        if not ext.startswith("."):
            ext = "." + ext
        normalized.append(ext)
    return tuple(normalized)


def find_config_file(root: Path) -> Optional[Path]:
    """Return the default config file in the scan root, if there is one."""
    candidate = root / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    return None


def load_config(path: Optional[Path] = None, root: Optional[Path] = None) -> CleanerConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: Explicit config file. Must exist when given.
        root: Scan root searched for CONFIG_FILENAME when path is None.

    Returns:
        The loaded configuration, or defaults if no file applies.

    Raises:
        ConfigError: If the file cannot be read or holds invalid settings.
    """
    if path is None and root is not None:
        path = find_config_file(root)
    if path is None:
        return CleanerConfig()

    logger.debug("Loading config from %s", path)
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read config file: {e.strerror or e}", str(path)) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML: {e}", str(path)) from e

    if data is None:
        return CleanerConfig()
    if not isinstance(data, dict):
        raise ConfigError("config file must contain a mapping", str(path))

    return _from_mapping(data, str(path))


def _from_mapping(data: Dict[str, Any], source: str) -> CleanerConfig:
    unknown = sorted(set(map(str, data)) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(unknown)}", source)

    config = CleanerConfig()
    try:
        return config.merge(
            include_dirs=split_list(data["include_dirs"]) if "include_dirs" in data else None,
            exclude_dirs=split_list(data["exclude_dirs"]) if "exclude_dirs" in data else None,
            extensions=data.get("extensions"),
            output_format=data.get("format"),
        )
    except ConfigError as e:
        raise ConfigError(e.message, source) from e


def _check_format(output_format: str) -> None:
    if output_format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"unknown output format '{output_format}' (expected one of: {', '.join(OUTPUT_FORMATS)})"
        )
