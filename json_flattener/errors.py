from __future__ import annotations


class JsonFlattenerError(Exception):
    """Base class for every error raised by json_flattener."""


class JsonSyntaxError(JsonFlattenerError, ValueError):
    """The source is not a well-formed JSON document."""

    def __init__(self, lineno: int, colno: int, pos: int):
        self.lineno = lineno
        self.colno = colno
        self.pos = pos
        super().__init__(
            f"JSON syntax error in the specified source at line {lineno}, column {colno}"
        )


class SourceUnreadableError(JsonFlattenerError, OSError):
    """The source stream could not be read (or decoded)."""


class NotYetParsedError(JsonFlattenerError, RuntimeError):
    def __init__(self, message: str = "JSON document has not been parsed"):
        super().__init__(message)


class InvalidArgumentError(JsonFlattenerError, ValueError):
    """A caller passed None where a path was required."""
