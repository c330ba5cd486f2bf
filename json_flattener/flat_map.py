from __future__ import annotations

from bisect import bisect_right
from typing import Dict, Iterator, List, NamedTuple, Optional, Tuple


def _fold_char(char: str) -> str:
    folded = char.upper().lower()
    # 'ß' -> 'ss' would merge distinct keys; such characters compare as is
    return folded if len(folded) == 1 else char


def fold_path(path: str) -> str:
    """Comparison key for paths: case-insensitive, casing kept elsewhere.

    Folded one character at a time, so the key has the length of the path.
    """
    return ''.join(_fold_char(c) for c in path)


class FlatMap:
    """Ordered path -> value table, compared case-insensitively.

    - Keys that differ only in case are the same key: the first casing seen is
      kept, the last value written wins.
    - Iteration is in case-insensitive lexicographic order of the paths, never
      insertion order.
    - `floor_key` returns the stored key (original casing) of the greatest key
      less than or equal to the one given.
    """

    def __init__(self, items=None):
        self._entries: Dict[str, Tuple[str, str]] = {}
        self._order: Optional[List[str]] = None
        self._frozen = False
        if items:
            for key, value in items:
                self[key] = value

    def freeze(self) -> None:
        """Refuse any further write; readers may then share the map."""
        self._sorted_folded()
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_writable(self) -> None:
        if self._frozen:
            raise TypeError("FlatMap is read-only once flattening is done")

    def _sorted_folded(self) -> List[str]:
        if self._order is None:
            self._order = sorted(self._entries)
        return self._order

    def __setitem__(self, key: str, value: str) -> None:
        self._check_writable()
        folded = fold_path(key)
        existing = self._entries.get(folded)
        if existing is None:
            self._entries[folded] = (key, value)
            self._order = None
        else:
            self._entries[folded] = (existing[0], value)

    def __getitem__(self, key: str) -> str:
        return self._entries[fold_path(key)][1]

    def __delitem__(self, key: str) -> None:
        self._check_writable()
        del self._entries[fold_path(key)]
        self._order = None

    def __contains__(self, key) -> bool:
        return isinstance(key, str) and fold_path(key) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        for folded in self._sorted_folded():
            yield self._entries[folded][0]

    def __eq__(self, other) -> bool:
        if isinstance(other, FlatMap):
            return list(self.items()) == list(other.items())
        if isinstance(other, dict):
            return dict(self.items()) == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"FlatMap({list(self.items())!r})"

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        entry = self._entries.get(fold_path(key))
        return default if entry is None else entry[1]

    def pop(self, key: str) -> str:
        value = self[key]
        del self[key]
        return value

    def keys(self) -> List[str]:
        return list(self)

    def values(self) -> List[str]:
        return [self._entries[f][1] for f in self._sorted_folded()]

    def items(self) -> Iterator[Tuple[str, str]]:
        for folded in self._sorted_folded():
            yield self._entries[folded]

    def floor_key(self, key: str) -> Optional[str]:
        order = self._sorted_folded()
        pos = bisect_right(order, fold_path(key))
        if pos == 0:
            return None
        return self._entries[order[pos - 1]][0]


class ArrayEntry(NamedTuple):
    path: str
    length: int


class ArrayIndex:
    """Every array met while flattening, with its element count.

    Kept in visiting order (depth-first, an array is recorded after its
    elements). Paths are the raw walk paths, so the root array is "".
    """

    def __init__(self, entries=None):
        self._entries: List[ArrayEntry] = []
        self._lengths: Dict[str, int] = {}
        self._frozen = False
        for path, length in entries or ():
            self.add(path, length)

    def add(self, path: str, length: int) -> None:
        if self._frozen:
            raise TypeError("ArrayIndex is read-only once flattening is done")
        self._entries.append(ArrayEntry(path, length))
        # first occurrence wins on lookup
        self._lengths.setdefault(fold_path(path), length)

    def freeze(self) -> None:
        self._frozen = True

    def length_of(self, path: str) -> int:
        """Element count of the array at `path`, 0 when it is not an array."""
        return self._lengths.get(fold_path(path), 0)

    def is_array(self, path: str) -> bool:
        return fold_path(path) in self._lengths

    def __iter__(self) -> Iterator[ArrayEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other) -> bool:
        if isinstance(other, ArrayIndex):
            return self._entries == other._entries
        if isinstance(other, list):
            return [tuple(e) for e in self._entries] == [tuple(e) for e in other]
        return NotImplemented

    def __repr__(self) -> str:
        return f"ArrayIndex({[tuple(e) for e in self._entries]!r})"
