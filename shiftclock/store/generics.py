# shiftclock/store/generics.py
# Generic filesystem helpers: atomic text writes & safe JSON parsing

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Union

from ..core.exceptions import FileReadError, FileWriteError, JSONParsingError
from ..core.events import store_read, store_write


def ensure_parent(path: Union[Path, str]) -> None:
    # create parent directories for any file path
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)


# * Write text via temp file + rename so readers never observe a partial write
def write_text_atomic(path: Path, content: str) -> None:
    path = Path(path)
    try:
        ensure_parent(path)
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
    except OSError as e:
        raise FileWriteError(f"Cannot write {path}: {e}", path)

    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(content)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_name, path)
    except OSError as e:
        Path(tmp_name).unlink(missing_ok=True)
        raise FileWriteError(f"Cannot write {path}: {e}", path)
    store_write(path, len(content))


# read text w/ UTF-8 encoding
def read_text_safe(path: Path) -> str:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise FileReadError(f"Cannot read {path}: {e}", path)
    store_read(path, len(text))
    return text


# write JSON w/ UTF-8 encoding, creating parent dirs as needed
def write_json_safe(obj: Any, path: Path) -> None:
    write_text_atomic(path, json.dumps(obj, indent=2))


# * Parse JSON text; errors carry a numbered snippet around the offending line
def loads_json_safe(text: str, source: Union[Path, str]) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        lines = text.split("\n")
        # JSONDecodeError uses 1-based line numbers
        line_num = e.lineno - 1
        snippet_start = max(0, line_num - 2)
        snippet_end = min(len(lines), line_num + 3)
        snippet_lines = lines[snippet_start:snippet_end]

        # add line numbers & highlight the problematic line
        numbered_lines = []
        for i, line in enumerate(snippet_lines, start=snippet_start + 1):
            marker = ">>> " if i == e.lineno else "    "
            numbered_lines.append(f"{marker}{i:3}: {line}")

        snippet = "\n".join(numbered_lines)
        raise JSONParsingError(f"Invalid JSON in {source}:\n{snippet}\nError: {e.msg}")


# read JSON w/ UTF-8 encoding
def read_json_safe(path: Path) -> Any:
    return loads_json_safe(read_text_safe(path), path)
