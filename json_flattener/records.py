from __future__ import annotations

from typing import List

from .constants import ROOT_PATH
from .flat_map import ArrayIndex
from .paths import child_path, index_path, normalize_entry_path, split_path


def resolve_root_rows(array_index: ArrayIndex) -> List[str]:
    """Starting row prefixes: one per element when the document is an array."""
    root_length = array_index.length_of('')
    if root_length > 0:
        return [index_path('', i) for i in range(root_length)]
    return [ROOT_PATH]


def expand_rows(rows: List[str], segment: str, array_index: ArrayIndex) -> List[str]:
    """Append `segment` to every row, fanning out over the arrays it names."""
    expanded: List[str] = []
    for row in rows:
        path = child_path(row, segment)
        length = array_index.length_of(path)
        if length > 0:
            expanded.extend(index_path(path, i) for i in range(length))
        else:
            expanded.append(path)
    return expanded


def resolve_row_paths(entry_path: str, array_index: ArrayIndex) -> List[str]:
    """Expand an entry path into the concrete row paths of the CSV records.

    Every array crossed along the path contributes one row per element, outer
    arrays varying slower than inner ones:

        /arrayB/id on [{"arrayB": [{"id": 1}, {"id": 2}]}]
        -> [0]/arrayB[0]/id, [0]/arrayB[1]/id

    Rows are not checked against the flat map here.
    """
    rows = resolve_root_rows(array_index)
    for segment in split_path(normalize_entry_path(entry_path)):
        rows = expand_rows(rows, segment, array_index)
    return rows
