"""
On demand lookup of the extended star attributes.

The catalogs are addressed by line: HR N is line N of the BSC5 file and
supplement star N is line N - primary_count of the BSC4S file.  Every
lookup opens the file, reads up to the wanted line and closes it again.
With use_line_index a table of line start offsets is built on first use
so later lookups seek straight to the record.
"""

import logging
import threading
from pathlib import Path
from typing import Dict, Optional, Union

import numpy as np

from BrightStars.catalog_imports import bsc4s_loader, bsc5_loader
from BrightStars.catalog_imports.catalog_import_utils import (
    CATALOG_ENCODING,
    open_catalog,
)
from BrightStars.errors import RecordNotFound
from BrightStars.star import StarDetail

logger = logging.getLogger("BrightStars.Details")


def read_catalog_line(
    path: Union[str, Path], ordinal: int, encoding: str = CATALOG_ENCODING
) -> str:
    """
    Sequential scan to line `ordinal` (1-based).
    Raises RecordNotFound when the file is shorter.
    """
    line_count = 0
    with open_catalog(path, encoding) as df:
        for line_count, line in enumerate(df, 1):
            if line_count == ordinal:
                return line.rstrip("\r\n")
    raise RecordNotFound(path, ordinal, line_count)


class LineIndex:
    """
    Byte offsets of the line starts of a catalog file.

    offsets[i] is where line i + 1 starts, the last entry is the file size.
    Built lazily and only once, safe to share between threads.
    """

    def __init__(self, path: Union[str, Path], encoding: str = CATALOG_ENCODING):
        self.path = Path(path)
        self.encoding = encoding
        self._offsets: Optional[np.ndarray] = None
        self._lock = threading.Lock()

    @property
    def offsets(self) -> np.ndarray:
        if self._offsets is None:
            with self._lock:
                if self._offsets is None:
                    self._offsets = self._build()
        return self._offsets

    def _build(self) -> np.ndarray:
        offsets = [0]
        with open(self.path, "rb") as f:
            for raw_line in f:
                offsets.append(offsets[-1] + len(raw_line))
        logger.debug(f"Indexed {len(offsets) - 1} lines of {self.path}")
        return np.array(offsets, dtype=np.int64)

    def __len__(self) -> int:
        return len(self.offsets) - 1

    def read_line(self, ordinal: int) -> str:
        offsets = self.offsets
        if ordinal < 1 or ordinal >= len(offsets):
            raise RecordNotFound(self.path, ordinal, len(offsets) - 1)
        start, end = int(offsets[ordinal - 1]), int(offsets[ordinal])
        with open(self.path, "rb") as f:
            f.seek(start)
            raw_line = f.read(end - start)
        return raw_line.decode(self.encoding).rstrip("\r\n")


class DetailLookup:
    def __init__(
        self,
        bsc5_path: Union[str, Path],
        bsc4s_path: Union[str, Path],
        primary_count: int,
        encoding: str = CATALOG_ENCODING,
        use_line_index: bool = False,
    ):
        self.bsc5_path = Path(bsc5_path)
        self.bsc4s_path = Path(bsc4s_path)
        self.primary_count = primary_count
        self.encoding = encoding
        self._indexes: Optional[Dict[Path, LineIndex]] = None
        if use_line_index:
            self._indexes = {
                self.bsc5_path: LineIndex(self.bsc5_path, encoding),
                self.bsc4s_path: LineIndex(self.bsc4s_path, encoding),
            }

    def _read_line(self, path: Path, ordinal: int) -> str:
        if self._indexes is not None:
            return self._indexes[path].read_line(ordinal)
        return read_catalog_line(path, ordinal, self.encoding)

    def get_details(self, number: int) -> Optional[StarDetail]:
        """
        Details of star `number`, None if there is no such star.
        A malformed record raises FormatError.
        """
        if number <= 0:
            return None

        try:
            if number <= self.primary_count:
                line = self._read_line(self.bsc5_path, number)
                return bsc5_loader.decode_details(self.bsc5_path, number, line)

            ordinal = number - self.primary_count
            line = self._read_line(self.bsc4s_path, ordinal)
            return bsc4s_loader.decode_details(self.bsc4s_path, ordinal, line)
        except RecordNotFound as e:
            logger.debug(f"No details for star {number}: {e}")
            return None
