"""Reading and writing JSON and JSONL files."""

import json
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import Any


def read_json(path: Path | str) -> Any:
    """Read a single JSON document."""
    with open(path) as f:
        return json.load(f)


def read_jsonl(
    path: Path | str,
    on_error: Callable[[int, json.JSONDecodeError], None] | None = None,
) -> Iterator[tuple[int, dict[str, Any]]]:
    """Read a JSONL file, yielding (line number, record) pairs.

    Args:
        path: Path to the JSONL file.
        on_error: Called with the line number and error for lines that
            are not valid JSON; those lines are skipped. Without it the
            first bad line raises ValueError.

    Yields:
        Line number (1-based) and parsed record.
    """
    with open(path) as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError as e:
                if on_error is None:
                    raise ValueError(f"Invalid JSON on line {line_num}: {e}") from e
                on_error(line_num, e)
                continue
            yield line_num, record


def write_jsonl(path: Path | str, records: Iterable[dict[str, Any]]) -> int:
    """Write records to a JSONL file.

    Returns:
        Number of records written.
    """
    count = 0
    with open(path, "w") as f:
        for record in records:
            f.write(json.dumps(record, ensure_ascii=False, default=str) + "\n")
            count += 1
    return count
