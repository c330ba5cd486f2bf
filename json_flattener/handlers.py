from __future__ import annotations

import os
import re
import tempfile
from typing import List, Optional

import gradio as gr

from .constants import DEFAULT_CSV_SEPARATOR, ROOT_PATH
from .document import FlatDocument, JsonFlattener
from .errors import JsonFlattenerError, SourceUnreadableError
from .io_utils import read_source_text
from .paths import normalize_entry_path

ARRAY_INDEX_RE = re.compile(r"\[\d+\]")

PREVIEW_LINES = 20


def read_uploaded_file(file_obj) -> str:
    """Read the text of an uploaded file (file-like object or file path)."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        return read_source_text(file_obj)

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    try:
        with open(path, 'rb') as f:
            content = f.read()
    except OSError as e:
        raise SourceUnreadableError(f"Cannot read {path}: {e}") from e
    return read_source_text(content)


def parse_properties_text(text: Optional[str]) -> List[str]:
    """One property path per line, blank lines ignored."""
    if not text:
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]


def entry_path_choices(document: FlatDocument) -> List[str]:
    """Array paths with their indexes removed, usable as CSV entry paths."""
    choices = [ROOT_PATH]
    for array_path in document.array_paths():
        path = normalize_entry_path(ARRAY_INDEX_RE.sub('', array_path))
        if path not in choices:
            choices.append(path)
    return choices


def load_and_flatten_json(file_obj, remove_nodes: bool = False):
    """Parse an upload; returns (document, status, flat dump, entry dropdown, count)."""
    if file_obj is None:
        return None, "No file uploaded.", "", gr.update(choices=[ROOT_PATH], value=ROOT_PATH), ""

    try:
        document = JsonFlattener(read_uploaded_file(file_obj)).parse(remove_nodes=bool(remove_nodes))
    except (JsonFlattenerError, ValueError) as e:
        return None, f"Error parsing JSON: {str(e)}", "", gr.update(choices=[ROOT_PATH], value=ROOT_PATH), ""

    choices = entry_path_choices(document)
    default_entry = choices[1] if len(choices) > 1 else ROOT_PATH
    message = f"Successfully loaded. Found {len(document)} paths and {len(document.array_index)} arrays."
    return (
        document,
        message,
        document.flat_tree(),
        gr.update(choices=choices, value=default_entry),
        compute_row_count_text(document, default_entry),
    )


def compute_row_count_text(document: Optional[FlatDocument], entry_path: str) -> str:
    if document is None:
        return ""
    return f"Rows: {len(document.row_paths(entry_path or ROOT_PATH))}"


def handle_entry_change(document: Optional[FlatDocument], entry_path: str):
    return compute_row_count_text(document, entry_path), ""


def preview_csv_handler(document: Optional[FlatDocument], entry_path, properties_text, separator):
    if document is None:
        return ""
    try:
        csv_text = document.to_csv(entry_path or ROOT_PATH, parse_properties_text(properties_text), separator or None)
    except JsonFlattenerError as e:
        return f"Error: {str(e)}"
    lines = csv_text.splitlines(keepends=True)
    return ''.join(lines[:PREVIEW_LINES])


def export_csv_handler(document: Optional[FlatDocument], entry_path, properties_text, separator, file_name):
    if document is None:
        return None, "No data loaded."

    try:
        csv_text = document.to_csv(entry_path or ROOT_PATH, parse_properties_text(properties_text), separator or None)
    except JsonFlattenerError as e:
        return None, f"Error during export: {str(e)}"

    if not file_name or not file_name.strip():
        file_name = "output"
    if not file_name.lower().endswith(".csv"):
        file_name += ".csv"

    path = os.path.join(tempfile.gettempdir(), file_name)
    try:
        with open(path, 'w', newline='', encoding='utf-8') as f:
            f.write(csv_text)
    except OSError as e:
        return None, f"Error during export: {str(e)}"

    rows = csv_text.count('\n')
    return path, f"Export successful! {rows} rows saved to {path} (separator '{separator or DEFAULT_CSV_SEPARATOR}')"
