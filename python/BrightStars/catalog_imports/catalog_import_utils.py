"""
Shared utilities for catalog import operations.

This module contains common functions used by the catalog loaders.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, TextIO, Tuple, Union

from tqdm import tqdm

from BrightStars.errors import FormatError
from BrightStars.fixed_width import Field, decode_record

CATALOG_ENCODING = "latin-1"

logger = logging.getLogger("BrightStars.Import")


def iter_catalog_lines(
    df: Iterable[str], desc: str = "", show_progress: bool = False
) -> Iterator[Tuple[int, str]]:
    """
    Yields (1-based line number, line without line terminator)
    """
    for line_number, line in enumerate(
        tqdm(df, desc=desc, leave=False, disable=not show_progress), 1
    ):
        yield line_number, line.rstrip("\r\n")


def decode_line(
    path: Union[str, Path], line_number: int, line: str, fields: Iterable[Field]
) -> Dict[str, Any]:
    """decode_record() with the file position added to any FormatError"""
    try:
        return decode_record(line, fields)
    except FormatError as e:
        logger.error(f"Cannot decode {path} line {line_number}: {e}")
        raise FormatError(str(e), path, line_number) from e


def open_catalog(path: Union[str, Path], encoding: str = CATALOG_ENCODING) -> TextIO:
    """
    Records end at a line feed only.  A stray carriage return inside a
    record stays part of the line, so line numbers match LineIndex offsets.
    """
    return open(path, "r", encoding=encoding, newline="\n")


def count_lines(path: Union[str, Path], encoding: str = CATALOG_ENCODING) -> int:
    with open_catalog(path, encoding) as df:
        return sum(1 for _ in df)
