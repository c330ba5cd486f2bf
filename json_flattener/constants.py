"""
Constants shared by the flattener, the denormalizer and the front ends.

Paths look like `/object/array[0]/id`: object members are joined with
PATH_SEPARATOR and array elements get an `[N]` suffix on their parent segment.
"""

# Placeholder values stored for container nodes (unless nodes are removed)
OBJECT_MARKER = "{object}"
ARRAY_MARKER = "{array}"

# Literal values stored for the JSON keywords
TRUE_TOKEN = "TRUE"
FALSE_TOKEN = "FALSE"
NULL_TOKEN = "NULL"

PATH_SEPARATOR = "/"

# The document root is walked as "" and addressed as "/" once flattening is done
ROOT_PATH = "/"

# Property references understood by the CSV export
SELF_REFERENCE = "."
PARENT_REFERENCE = ".."

# Between a path and its value in the flat dump
DEFAULT_VALUE_SEPARATOR = "="

# Between CSV columns (also written after the last column)
DEFAULT_CSV_SEPARATOR = ";"
