"""File system utilities."""

import json
from pathlib import Path
from typing import Any, List, Union

JSON_LINES_SUFFIXES = ('.jsonl', '.ndjson')


def read_json_entries(file_path: Union[str, Path]) -> List[Any]:
    """Read saved responses from a .json file (object or list) or a JSON Lines file.

    Blank lines in JSON Lines files are skipped. A single JSON object is
    returned as a one-entry list.
    """

    path = Path(file_path)
    suffix = path.suffix.lower()

    if suffix in JSON_LINES_SUFFIXES:
        with open(path, 'r', encoding='utf-8') as f:
            return [json.loads(line) for line in f if line.strip()]

    if suffix == '.json':
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return data if isinstance(data, list) else [data]

    raise ValueError(f"Unsupported file type: {path.suffix}")


def get_file_size(file_path: Union[str, Path]) -> dict:
    path = Path(file_path)
    if not path.exists():
        return {"error": "File not found"}

    size_bytes = path.stat().st_size
    return {
        "size_bytes": size_bytes,
        "size_mb": round(size_bytes / (1024 * 1024), 2),
    }


def ensure_directory(dir_path: Union[str, Path]) -> Path:
    """Create ``dir_path`` and its parents if missing."""

    path = Path(dir_path)
    path.mkdir(parents=True, exist_ok=True)
    return path
