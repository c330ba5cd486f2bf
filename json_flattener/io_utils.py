from __future__ import annotations

import json
import logging
from typing import Any, Tuple

from .errors import JsonSyntaxError, SourceUnreadableError

logger = logging.getLogger(__name__)


class JsonNumber(str):
    """A JSON number, kept as the exact text found in the source."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"JsonNumber({str.__repr__(self)})"


def read_source_text(source) -> str:
    """Read JSON text from a string, bytes, a file-like object or None."""
    if source is None:
        return ''
    if isinstance(source, str):
        return source

    if hasattr(source, 'read'):
        try:
            content = source.read()
        # ValueError covers closed files and undecodable text streams
        except (OSError, ValueError) as e:
            raise SourceUnreadableError(f"Cannot read the JSON source: {e}") from e
    else:
        content = source

    if isinstance(content, (bytes, bytearray)):
        try:
            content = bytes(content).decode('utf-8')
        except UnicodeDecodeError as e:
            raise SourceUnreadableError(f"Cannot read the JSON source: {e}") from e

    if content is None:
        return ''
    if not isinstance(content, str):
        raise SourceUnreadableError(
            f"Cannot read the JSON source: unsupported content type {type(content).__name__}"
        )
    return content


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON constant {name}")


def _locate(text: str, offset: int) -> Tuple[int, int]:
    line = text.count('\n', 0, offset) + 1
    column = offset - text.rfind('\n', 0, offset)
    return line, column


def find_constant(text: str) -> int:
    """Offset of the first NaN/Infinity/-Infinity outside string literals.

    Valid JSON has no upper case letter outside strings, so the first 'N' or
    'I' found there starts the constant. Returns 0 when there is none.
    """
    in_string = False
    escaping = False
    for i, ch in enumerate(text):
        if in_string:
            if escaping:
                escaping = False
            elif ch == '\\':
                escaping = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch in 'NI':
            if i > 0 and text[i - 1] == '-':
                return i - 1
            return i
    return 0


def parse_json_text(text: str) -> Any:
    """Parse JSON text into dict/list/str/JsonNumber/bool/None.

    Numbers are not converted, so `1.50` stays `1.50`. NaN and Infinity are
    rejected like any other syntax error.
    """
    try:
        return json.loads(
            text,
            parse_int=JsonNumber,
            parse_float=JsonNumber,
            parse_constant=_reject_constant,
        )
    except json.JSONDecodeError as e:
        raise JsonSyntaxError(e.lineno, e.colno, e.pos) from e
    except ValueError as e:
        offset = find_constant(text)
        line, column = _locate(text, offset)
        raise JsonSyntaxError(line, column, offset) from e


def read_json_content(source) -> Any:
    """Read and parse a JSON document from any supported source."""
    text = read_source_text(source)
    logger.debug("Parsing JSON source of %d characters", len(text))
    return parse_json_text(text)
