from __future__ import annotations

from pathlib import Path

from ..models import RawRegistryDocument
from .json_parser import parse_json_file, parse_json_text


def load_document(path: str | Path) -> RawRegistryDocument:
    return parse_json_file(path)


__all__ = ["load_document", "parse_json_file", "parse_json_text"]
