"""I/O utilities with atomic writes."""

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

    # Temp file in the destination directory keeps the move on one filesystem
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


def write_lines(path: Path, lines: Iterable[str]) -> int:
    """
    Write text lines atomically, one per line.

    Args:
        path: Destination path
        lines: Lines without trailing newlines

    Returns:
        Number of lines written
    """
    count = 0

    def _write(tmp_path: Path) -> None:
        nonlocal count
        with tmp_path.open("w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
                count += 1

    atomic_write(path, _write)
    return count


def read_lines(path: Path) -> Iterator[str]:
    """
    Read a UTF-8 text file line by line.

    Args:
        path: Path to text file

    Yields:
        Lines with the trailing newline removed
    """
    with Path(path).open("r", encoding="utf-8") as f:
        for line in f:
            yield line.rstrip("\n")


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
