"""Core logic for JSON Flattener and CSV Denormalizer.

The Gradio UI lives in `app.py`. This package contains the functions that:
- parse JSON sources, keeping numbers as written
- flatten a JSON tree into a path -> value table (`/a/b[0]/c=value`)
- denormalize that table into CSV, one record per array element
"""
from .document import FlatDocument, JsonFlattener, flatten_json, json_to_csv
from .errors import (
    InvalidArgumentError,
    JsonFlattenerError,
    JsonSyntaxError,
    NotYetParsedError,
    SourceUnreadableError,
)
from .flat_map import ArrayEntry, ArrayIndex, FlatMap
from .flattening import MISSING, flatten_tree
from .io_utils import JsonNumber

__all__ = [
    "ArrayEntry",
    "ArrayIndex",
    "FlatDocument",
    "FlatMap",
    "InvalidArgumentError",
    "JsonFlattener",
    "JsonFlattenerError",
    "JsonNumber",
    "JsonSyntaxError",
    "MISSING",
    "NotYetParsedError",
    "SourceUnreadableError",
    "flatten_json",
    "flatten_tree",
    "json_to_csv",
]
