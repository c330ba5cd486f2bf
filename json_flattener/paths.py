from __future__ import annotations

from typing import List

from .constants import PARENT_REFERENCE, PATH_SEPARATOR, ROOT_PATH, SELF_REFERENCE


def index_path(path: str, index: int) -> str:
    """Path of element `index` of the array at `path` (`/a` -> `/a[2]`)."""
    return f"{path}[{index}]"


def child_path(parent: str, name: str) -> str:
    """Path of member `name` below `parent`, without doubling the root slash."""
    if parent == ROOT_PATH:
        return PATH_SEPARATOR + name
    return f"{parent}{PATH_SEPARATOR}{name}"


def normalize_property(prop: str) -> str:
    """Strip one leading './' then every leading '/'.

    './x', '/x', '//x' and 'x' all name the same property.
    """
    if prop.startswith("./"):
        prop = prop[2:]
    while prop.startswith(PATH_SEPARATOR):
        prop = prop[1:]
    return prop


def normalize_entry_path(path: str) -> str:
    if not path:
        return ROOT_PATH
    if not path.startswith(PATH_SEPARATOR):
        return PATH_SEPARATOR + path
    return path


def split_path(path: str) -> List[str]:
    """Split a path on '/' and drop the empty segments."""
    if not path:
        return []
    return [p for p in path.split(PATH_SEPARATOR) if p != '']


def resolve_parent_references(segments: List[str]) -> List[str]:
    """Apply every '..' segment to the segment before it.

    A '..' only counts when another segment follows it (`a/..` is left as is),
    and it never climbs above the first segment: the root (empty segment of a
    leading '/') or the root array element (`[0]`). A '..' with nothing left
    to remove is dropped.
    """
    out: List[str] = []
    last = len(segments) - 1
    for i, segment in enumerate(segments):
        if segment == PARENT_REFERENCE and 0 < i < last:
            if len(out) > 1:
                out.pop()
            continue
        out.append(segment)
    return out


def property_path(row_path: str, prop: str) -> str:
    """Concrete path of a (normalized) property, relative to a row path.

    '.' is the row itself. Parent references are resolved on the segment list
    and the result is joined back into the flat map's string form.
    """
    if row_path == ROOT_PATH:
        row_path = ''
    if prop == SELF_REFERENCE:
        path = row_path
    else:
        path = row_path + PATH_SEPARATOR + prop
    if PARENT_REFERENCE not in path:
        return path
    return PATH_SEPARATOR.join(resolve_parent_references(path.split(PATH_SEPARATOR)))
