"""
Exceptions raised while decoding the bright star catalogs
"""

from pathlib import Path
from typing import Optional, Union


class CatalogError(Exception):
    """Base class for catalog decoding problems"""


class FormatError(CatalogError, ValueError):
    """
    A record could not be decoded: the line is shorter than a referenced
    column, a numeric column holds non-numeric text or a symbol table
    line is malformed.
    """

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        line_number: Optional[int] = None,
    ):
        self.path = path
        self.line_number = line_number
        if path is not None and line_number is not None:
            message = f"{path}:{line_number}: {message}"
        elif path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class RecordNotFound(CatalogError, LookupError):
    """The requested line ordinal lies past the end of a catalog file"""

    def __init__(self, path: Union[str, Path], ordinal: int, line_count: int):
        self.path = path
        self.ordinal = ordinal
        self.line_count = line_count
        super().__init__(
            f"{path}: record {ordinal} requested but file has {line_count} lines"
        )
