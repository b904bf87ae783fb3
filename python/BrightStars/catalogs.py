"""
Entry point for reading the bright star catalogs.

    reader = StarsReader.from_config(Config(), name_dictionary=sky_names)
    stars = reader.read_stars()
    details = reader.get_star_details(stars[0].number)
"""

import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple, Union

from BrightStars.catalog_imports.alphabet_loader import load_alphabet
from BrightStars.catalog_imports.bsc4s_loader import read_bsc4s_stars
from BrightStars.catalog_imports.bsc5_loader import read_bsc5_records
from BrightStars.catalog_imports.catalog_import_utils import (
    CATALOG_ENCODING,
    count_lines,
)
from BrightStars.config import Config
from BrightStars.details import DetailLookup
from BrightStars.star import Star, StarDetail

logger = logging.getLogger("BrightStars.Reader")

PathLike = Union[str, Path]


class StarsReader:
    """
    Reads the BSC5 catalog, its supplement and the symbol table.

    primary_count is the number of BSC5 records (lines), the numbering
    base of the supplement stars.  When not given it is taken from the
    BSC5 file itself.
    """

    def __init__(
        self,
        bsc5_path: PathLike,
        bsc4s_path: PathLike,
        alphabet_path: Optional[PathLike] = None,
        name_dictionary: Optional[Mapping[str, str]] = None,
        primary_count: Optional[int] = None,
        encoding: str = CATALOG_ENCODING,
        use_line_index: bool = False,
        show_progress: bool = False,
    ):
        self.bsc5_path = Path(bsc5_path)
        self.bsc4s_path = Path(bsc4s_path)
        self.alphabet_path = Path(alphabet_path) if alphabet_path else None
        self.name_dictionary: Mapping[str, str] = name_dictionary or {}
        self.encoding = encoding
        self.use_line_index = use_line_index
        self.show_progress = show_progress
        self._primary_count = primary_count
        self._details: Optional[DetailLookup] = None

    @classmethod
    def from_config(
        cls, config: Config, name_dictionary: Optional[Mapping[str, str]] = None
    ) -> "StarsReader":
        return cls(
            bsc5_path=config.get_path("bsc5_file"),
            bsc4s_path=config.get_path("bsc4s_file"),
            alphabet_path=config.get_path("alphabet_file"),
            name_dictionary=name_dictionary,
            primary_count=config.get_option("bsc_stars_count"),
            encoding=config.get_option("catalog_encoding", CATALOG_ENCODING),
            use_line_index=config.get_option("detail_line_index", False),
            show_progress=config.get_option("show_progress", False),
        )

    @property
    def primary_count(self) -> int:
        if self._primary_count is None:
            self._primary_count = count_lines(self.bsc5_path, self.encoding)
            logger.debug(f"{self.bsc5_path} has {self._primary_count} records")
        return self._primary_count

    def read_records(self) -> List[Optional[Star]]:
        """
        BSC5 stars by line, None where a line holds no star.
        Used for line addressed access, read_stars() is the public view.
        """
        records = read_bsc5_records(
            self.bsc5_path, self.name_dictionary, self.encoding, self.show_progress
        )
        if self._primary_count is None:
            self._primary_count = len(records)
        elif self._primary_count != len(records):
            logger.warning(
                f"Configured BSC5 count {self._primary_count} differs from "
                f"{len(records)} records in {self.bsc5_path}"
            )
        return records

    def read_stars(self) -> Tuple[Star, ...]:
        """BSC5 stars followed by the supplement stars, placeholders omitted"""
        records = self.read_records()
        stars = [star for star in records if star is not None]
        stars.extend(
            read_bsc4s_stars(
                self.bsc4s_path,
                self.primary_count,
                self.name_dictionary,
                self.encoding,
                self.show_progress,
            )
        )
        logger.info(f"Read {len(stars)} stars")
        return tuple(stars)

    @property
    def details(self) -> DetailLookup:
        if self._details is None:
            self._details = DetailLookup(
                self.bsc5_path,
                self.bsc4s_path,
                self.primary_count,
                self.encoding,
                self.use_line_index,
            )
        return self._details

    def get_star_details(self, number: int) -> Optional[StarDetail]:
        return self.details.get_details(number)

    def read_symbol_table(self) -> Dict[str, str]:
        if self.alphabet_path is None:
            raise ValueError("No symbol table file configured")
        return load_alphabet(self.alphabet_path)
