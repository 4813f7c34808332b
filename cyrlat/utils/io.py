"""I/O utilities with atomic writes and safe file operations."""

import json
import shutil
import tempfile
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import Any


def atomic_write(
    path: Path,
    write_func: Callable[[Path], None],
) -> None:
    """
    Atomically write to a file using temp file and move.

    Args:
        path: Destination path
        write_func: Function that writes to a given path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    # Same directory keeps the move on one filesystem
    with tempfile.NamedTemporaryFile(
        mode="wb",
        dir=path.parent,
        delete=False,
        prefix=f".tmp.{path.name}.",
    ) as tmp_file:
        tmp_path = Path(tmp_file.name)

    try:
        write_func(tmp_path)
        shutil.move(str(tmp_path), str(path))
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise


def write_text(path: Path, lines: Iterable[str]) -> int:
    """
    Write text lines atomically.

    Lines are written as given; callers keep their own line endings.

    Args:
        path: Destination path
        lines: Lines to write

    Returns:
        Number of lines written
    """
    count = 0

    def _write(tmp_path: Path) -> None:
        nonlocal count
        with tmp_path.open("w", encoding="utf-8", newline="") as f:
            for line in lines:
                f.write(line)
                count += 1

    atomic_write(path, _write)
    return count


def read_text_lines(path: Path) -> Iterator[str]:
    """
    Read a text file line by line, keeping line endings.

    Args:
        path: Path to text file

    Yields:
        Lines including their terminators
    """
    with Path(path).open("r", encoding="utf-8", newline="") as f:
        yield from f


def read_json(path: Path) -> Any:
    """
    Read JSON file.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON data
    """
    with Path(path).open("r", encoding="utf-8") as f:
        return json.load(f)
