from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

from .cancellation import CancellationToken


def walk_files(root: str | Path, token: CancellationToken | None = None) -> Iterator[Path]:
    """Yield every regular file under ``root``, depth first.

    Entries are visited in name order; a subdirectory is fully walked before
    the entries that follow it. The walk stops quietly as soon as ``token`` is
    cancelled.
    """
    stack: list[Iterator[os.DirEntry[str]]] = [iter(_sorted_entries(Path(root)))]

    while stack:
        if token is not None and token.is_cancelled():
            return
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue
        if entry.is_dir(follow_symlinks=False):
            stack.append(iter(_sorted_entries(Path(entry.path))))
            continue
        if not entry.is_file():
            continue
        yield Path(entry.path)


def _sorted_entries(directory: Path) -> list[os.DirEntry[str]]:
    with os.scandir(directory) as entries:
        return sorted(entries, key=lambda entry: entry.name)
