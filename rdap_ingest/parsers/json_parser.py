from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from ..errors import DocumentDecodeError, DocumentLoadError
from ..models import RawRegistryDocument


def parse_json_text(raw: str | bytes, path: str | Path | None = None) -> RawRegistryDocument:
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DocumentDecodeError(f"malformed JSON: {exc}", path) from exc

    if not isinstance(payload, dict):
        raise DocumentDecodeError(f"expected a JSON object, got {type(payload).__name__}", path)

    try:
        return RawRegistryDocument.model_validate(payload)
    except ValidationError as exc:
        raise DocumentDecodeError(f"unexpected document shape: {exc}", path) from exc


def parse_json_file(path: str | Path) -> RawRegistryDocument:
    try:
        with open(path, "rb") as handle:
            raw = handle.read()
    except OSError as exc:
        raise DocumentLoadError(f"cannot read file: {exc}", path) from exc
    return parse_json_text(raw, path)
