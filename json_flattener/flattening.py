from __future__ import annotations

import logging
from typing import Any, Tuple

from .constants import ARRAY_MARKER, FALSE_TOKEN, NULL_TOKEN, OBJECT_MARKER, ROOT_PATH, TRUE_TOKEN
from .flat_map import ArrayIndex, FlatMap
from .paths import index_path

logger = logging.getLogger(__name__)

# Stands for "no tree at all"; None is the JSON null
MISSING = object()


def scalar_text(value: Any) -> str:
    """Flat map text of a JSON leaf."""
    if value is None:
        return NULL_TOKEN
    if value is True:
        return TRUE_TOKEN
    if value is False:
        return FALSE_TOKEN
    # JsonNumber is a str holding the source text
    return str(value)


def navigate_tree(tree: Any, path: str, flat_map: FlatMap, array_index: ArrayIndex, remove_nodes: bool) -> None:
    """Depth-first walk that fills the flat map and the array index.

    /obj/propA = value
    /obj/propB[0] = value
    /obj/propC/arr[0]/id = value
    """
    if isinstance(tree, dict):
        if not remove_nodes:
            flat_map[path] = OBJECT_MARKER
        for name, value in tree.items():
            navigate_tree(value, f"{path}/{name}", flat_map, array_index, remove_nodes)

    elif isinstance(tree, list):
        if not remove_nodes:
            flat_map[path] = ARRAY_MARKER
        for i, value in enumerate(tree):
            navigate_tree(value, index_path(path, i), flat_map, array_index, remove_nodes)
        # recorded even when nodes are removed
        array_index.add(path, len(tree))

    else:
        flat_map[path] = scalar_text(tree)


def flatten_tree(tree: Any = MISSING, remove_nodes: bool = False) -> Tuple[FlatMap, ArrayIndex]:
    """Flatten a parsed JSON tree into (FlatMap, ArrayIndex).

    `remove_nodes` drops the {object}/{array} entries of container nodes.
    The root is walked as "" and ends up addressed as "/". Both results are
    read-only.
    """
    flat_map = FlatMap()
    array_index = ArrayIndex()
    if tree is not MISSING:
        navigate_tree(tree, '', flat_map, array_index, remove_nodes)

    if '' in flat_map:
        flat_map[ROOT_PATH] = flat_map.pop('')

    flat_map.freeze()
    array_index.freeze()

    logger.debug("Flattened %d entries, %d arrays", len(flat_map), len(array_index))
    return flat_map, array_index
