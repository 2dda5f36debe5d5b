"""Exporters for converting redundant include findings to output formats."""

from .text_exporter import to_text
from .json_exporter import to_json

__all__ = ["to_text", "to_json"]
