from __future__ import annotations

"""
Domain Error Taxonomy.

Exceptions raised by the ingestion layer. Lookup misses and orphaned
insertions are not errors and are reported through return values.
"""


class PathTreeError(Exception):
    """Base class for every error raised by pathtree."""


class MalformedPathError(PathTreeError, ValueError):
    """
    Raised when a raw path line cannot be turned into a node.

    Attributes:
        line: The offending raw input.
        reason: Short description of the structural problem.
    """

    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"Malformed path {line!r}: {reason}")


class SourceReadError(PathTreeError, OSError):
    """
    Raised when the path listing source cannot be opened or read.

    Attributes:
        source: File path or URL that failed.
    """

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Cannot read path listing from '{source}': {message}")
