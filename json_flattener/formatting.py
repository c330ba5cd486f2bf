from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .constants import DEFAULT_CSV_SEPARATOR, DEFAULT_VALUE_SEPARATOR
from .errors import InvalidArgumentError
from .flat_map import ArrayIndex, FlatMap
from .paths import normalize_property, property_path
from .records import resolve_row_paths

logger = logging.getLogger(__name__)


def dump_flat_tree(
    flat_map: FlatMap,
    value_separator: Optional[str] = DEFAULT_VALUE_SEPARATOR,
    replace_end_of_lines: Optional[str] = None,
) -> str:
    """One `path<separator>value` line per flat map entry, in path order.

    With `replace_end_of_lines`, newlines inside values are replaced by it so
    each entry stays on a single line.
    """
    if value_separator is None:
        value_separator = DEFAULT_VALUE_SEPARATOR
    lines: List[str] = []
    for path, value in flat_map.items():
        if replace_end_of_lines is not None:
            value = value.replace('\n', replace_end_of_lines)
        lines.append(f"{path}{value_separator}{value}\n")
    return ''.join(lines)


def clean_properties(properties: Optional[Iterable[str]]) -> List[str]:
    if properties is None:
        return []
    if isinstance(properties, str):
        raise InvalidArgumentError("CSV properties must be a list of paths, not a single string")
    properties = list(properties)
    if any(prop is None for prop in properties):
        raise InvalidArgumentError("Cannot convert JSON to CSV without a proper list of properties (non-null)")
    return [normalize_property(prop) for prop in properties]


def build_csv(
    flat_map: FlatMap,
    array_index: ArrayIndex,
    entry_path: str,
    properties: Optional[Iterable[str]] = None,
    separator: Optional[str] = None,
) -> str:
    """Denormalize the flat map into CSV text.

    One record per row path of `entry_path`: the row path itself, then the
    value of each property relative to it ('.' for the row, '../name' for a
    sibling of the row's parent). Each column is followed by the separator,
    missing values are empty, there is no header and no quoting.
    """
    if entry_path is None:
        raise InvalidArgumentError("Cannot convert JSON to CSV without a proper entry key (non-null)")
    properties = clean_properties(properties)
    if separator is None:
        separator = DEFAULT_CSV_SEPARATOR

    if not flat_map:
        return ''

    lines: List[str] = []
    for row in resolve_row_paths(entry_path, array_index):
        # entry paths that do not exist in this document produce no record
        if row not in flat_map:
            continue
        fields = [flat_map.floor_key(row)]
        for prop in properties:
            fields.append(flat_map.get(property_path(row, prop), ''))
        lines.append(''.join(field + separator for field in fields) + '\n')

    logger.debug("CSV export of %r: %d records", entry_path, len(lines))
    return ''.join(lines)
