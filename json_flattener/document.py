from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .constants import DEFAULT_VALUE_SEPARATOR, ROOT_PATH
from .errors import NotYetParsedError
from .flat_map import ArrayIndex, FlatMap
from .flattening import flatten_tree
from .formatting import build_csv, dump_flat_tree
from .io_utils import read_json_content
from .records import resolve_row_paths

logger = logging.getLogger(__name__)


class FlatDocument:
    """A parsed and flattened JSON document.

    Holds the flat map and the array index built by one parse. Both are
    frozen here (writes raise TypeError), so any number of exports (flat
    dumps, CSV views) can run against the same instance, from several
    threads too.
    """

    def __init__(self, flat_map: FlatMap, array_index: ArrayIndex):
        flat_map.freeze()
        array_index.freeze()
        self._flat_map = flat_map
        self._array_index = array_index

    @classmethod
    def from_tree(cls, tree, remove_nodes: bool = False) -> "FlatDocument":
        flat_map, array_index = flatten_tree(tree, remove_nodes)
        return cls(flat_map, array_index)

    @property
    def flat_map(self) -> FlatMap:
        return self._flat_map

    @property
    def array_index(self) -> ArrayIndex:
        return self._array_index

    def __len__(self) -> int:
        return len(self._flat_map)

    def array_paths(self) -> List[str]:
        """Paths of the arrays in the document, the root array shown as '/'."""
        return [entry.path or ROOT_PATH for entry in self._array_index]

    def row_paths(self, entry_path: str) -> List[str]:
        return [row for row in resolve_row_paths(entry_path, self._array_index) if row in self._flat_map]

    def flat_tree(
        self,
        value_separator: str = DEFAULT_VALUE_SEPARATOR,
        replace_end_of_lines: Optional[str] = None,
    ) -> str:
        """Dump the document as lines of `/object/array[0]/id=value`."""
        return dump_flat_tree(self._flat_map, value_separator, replace_end_of_lines)

    def to_csv(
        self,
        entry_path: str,
        properties: Optional[Iterable[str]] = None,
        separator: Optional[str] = None,
    ) -> str:
        """Convert the document to CSV, one record per `entry_path` row.

        `properties` are paths relative to each row ('.' for the row itself,
        '../x' for a sibling of its parent). `separator` defaults to ';'.
        """
        return build_csv(self._flat_map, self._array_index, entry_path, properties, separator)


class JsonFlattener:
    """Converts a JSON source to a flat structure and to CSV.

    `parse()` must be called before anything else:

        flattener = JsonFlattener('{"a": [{"x": 1}, {"x": 2}]}')
        flattener.parse()
        flattener.to_csv('/a', ['x'])   # '/a[0];1;\\n/a[1];2;\\n'
    """

    def __init__(self, source=None):
        self._source = source
        self._document: Optional[FlatDocument] = None

    @property
    def parsed(self) -> bool:
        return self._document is not None

    @property
    def document(self) -> FlatDocument:
        if self._document is None:
            raise NotYetParsedError()
        return self._document

    def parse(self, remove_nodes: bool = False) -> FlatDocument:
        """Read, parse and flatten the source.

        `remove_nodes` leaves out the {object}/{array} entries. Raises
        JsonSyntaxError or SourceUnreadableError; on failure the previous
        state, if any, is kept as it was.
        """
        tree = read_json_content(self._source)
        document = FlatDocument.from_tree(tree, remove_nodes)
        self._document = document
        logger.debug("Parsed JSON document: %d entries", len(document))
        return document

    def flat_tree(
        self,
        value_separator: str = DEFAULT_VALUE_SEPARATOR,
        replace_end_of_lines: Optional[str] = None,
    ) -> str:
        return self.document.flat_tree(value_separator, replace_end_of_lines)

    def to_csv(
        self,
        entry_path: str,
        properties: Optional[Iterable[str]] = None,
        separator: Optional[str] = None,
    ) -> str:
        return self.document.to_csv(entry_path, properties, separator)


def flatten_json(source, remove_nodes: bool = False) -> FlatDocument:
    """Parse and flatten a JSON source in one call."""
    return JsonFlattener(source).parse(remove_nodes)


def json_to_csv(
    source,
    entry_path: str,
    properties: Optional[Iterable[str]] = None,
    separator: Optional[str] = None,
) -> str:
    return flatten_json(source).to_csv(entry_path, properties, separator)
