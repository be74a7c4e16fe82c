"""File helpers shared by the JSON-backed repositories.

Writes land in a temp file in the same directory and are swapped in with
``os.replace``, so a reader sees either the old document or the new one,
never a partial write. Exclusion between processes uses a ``<name>.lock``
file beside the data file.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from filelock import FileLock


def lock_for(file_path: Path) -> FileLock:
    """A fresh lock object on each call; it is not re-entrant across calls."""
    return FileLock(f"{file_path}.lock")


def read_json(file_path: Path):
    return json.loads(file_path.read_text(encoding="utf-8"))


def write_json_atomic(file_path: Path, data) -> None:
    fd, tmp_name = tempfile.mkstemp(
        dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(json.dumps(data, indent=2) + "\n")
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_name, file_path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


def ensure_json_file(file_path: Path, empty) -> None:
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with lock_for(file_path):
        if not file_path.exists():
            write_json_atomic(file_path, empty)
