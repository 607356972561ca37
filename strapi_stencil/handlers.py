from __future__ import annotations

import logging
import os
import tempfile
from typing import Any, Optional, Tuple

from .flattening import flatten
from .injections import fill_from_main
from .io_utils import dump_json, parse_json_text, read_json_content
from .localization import localize_array, localize_single

logger = logging.getLogger(__name__)

MODE_FLATTEN = "Flatten"
MODE_LOCALIZE_SINGLE = "Localize single"
MODE_LOCALIZE_ARRAY = "Localize array"
MODES = [MODE_FLATTEN, MODE_LOCALIZE_SINGLE, MODE_LOCALIZE_ARRAY]


def describe_response(data: Any) -> str:
    if not isinstance(data, dict) or 'data' not in data:
        return ""
    payload = data['data']
    if isinstance(payload, list):
        return f"Entities: {len(payload)}"
    if payload is None:
        return "Entities: 0 (null data)"
    return "Entities: 1"


def load_response_file(file_obj):
    if file_obj is None:
        return None, "No file uploaded.", "", None

    try:
        data = read_json_content(file_obj)
    except (OSError, ValueError) as e:
        logger.warning("Could not read uploaded response: %s", e)
        return None, f"Error parsing JSON: {str(e)}", "", None

    return data, "Successfully loaded.", describe_response(data), None


def load_response_text(text: Optional[str]):
    try:
        data = parse_json_text(text)
    except ValueError as e:
        return None, f"Error parsing JSON: {str(e)}", "", None
    return data, "Successfully loaded.", describe_response(data), None


def transform_response(data: Any, mode: str = MODE_FLATTEN, fill_missing: bool = False) -> Any:
    inject = fill_from_main if fill_missing else None
    if mode == MODE_LOCALIZE_SINGLE:
        return localize_single(data, inject)
    if mode == MODE_LOCALIZE_ARRAY:
        return localize_array(data, inject)
    if mode == MODE_FLATTEN:
        return flatten(data)
    raise ValueError(f"Unknown mode: {mode}")


def _preview(result: Any, limit: int = 3) -> Any:
    if isinstance(result, list):
        return result[:max(1, int(limit))]
    return result


def preview_handler(data, mode, fill_missing=False) -> Tuple[Any, str]:
    if data is None:
        return None, "No data loaded."
    try:
        result = transform_response(data, mode, fill_missing)
    except ValueError as e:
        logger.warning("Transformation failed (%s): %s", mode, e)
        return None, f"Error during transformation: {str(e)}"
    return _preview(result), f"{mode} succeeded."


def export_handler(data, mode, fill_missing=False, file_name=None) -> Tuple[Optional[str], str]:
    if data is None:
        return None, "No data loaded."

    try:
        result = transform_response(data, mode, fill_missing)
    except ValueError as e:
        logger.warning("Transformation failed (%s): %s", mode, e)
        return None, f"Error during transformation: {str(e)}"

    if not file_name or not file_name.strip():
        file_name = "flattened"
    file_name = file_name.strip()
    if not file_name.lower().endswith('.json'):
        file_name += '.json'

    path = os.path.join(tempfile.gettempdir(), file_name)
    try:
        dump_json(result, path)
    except OSError as e:
        return None, f"Error during export: {str(e)}"
    return path, f"Export successful! Saved to {path}"
