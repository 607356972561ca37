from __future__ import annotations

import json
from typing import Any


def parse_json_text(content: Any) -> Any:
    """Parse a response body given as text or bytes."""
    if isinstance(content, bytes):
        content = content.decode('utf-8')
    if not isinstance(content, str) or not content.strip():
        raise ValueError("No JSON content provided.")
    return json.loads(content)


def read_json_content(file_obj):
    """Read a response body from an uploaded file, file-like object or path."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        return parse_json_text(file_obj.read())

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def dump_json(data: Any, path: str) -> str:
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    return path
