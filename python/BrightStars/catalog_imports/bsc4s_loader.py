"""
Supplement to the Bright Star Catalogue, 4th edition (BSC4S) loader.

https://cdsarc.cds.unistra.fr/viz-bin/cat/V/36B

The supplement has no HR numbers.  Stars are numbered after the last
BSC5 record: number = BSC5 record count + line number.  Designations,
FK5 numbers and variable names are not part of this format.
"""

import logging
from pathlib import Path
from typing import List, Mapping, Optional, Union

from BrightStars.calc_utils import dec_to_deg, parse_float, parse_int, ra_to_deg
from BrightStars.fixed_width import Field, required_length
from BrightStars.names import with_proper_name
from BrightStars.star import Star, StarDetail
from BrightStars.utils import Timer
from .catalog_import_utils import (
    CATALOG_ENCODING,
    decode_line,
    iter_catalog_lines,
    open_catalog,
)

logger = logging.getLogger("BrightStars.BSC4S")

STAR_FIELDS = (
    Field("hd_number", 0, 8, optional=True),
    Field("sao_number", 19, 6, parse_int, optional=True),
    Field("ra_h", 69, 2, parse_int),
    Field("ra_m", 72, 2, parse_int),
    Field("ra_s", 75, 4, parse_float),
    Field("dec_sign", 80, 1, raw=True),
    Field("dec_d", 81, 2, parse_int),
    Field("dec_m", 84, 2, parse_int),
    Field("dec_s", 87, 2, parse_int),
    Field("magnitude", 104, 4, parse_float),
    Field("color", 129, 1, raw=True),
    Field("pm_ra", 148, 6, parse_float, optional=True),
    Field("pm_dec", 155, 6, parse_float, optional=True),
)

DETAIL_FIELDS = (Field("spectral_class", 127, 20),)

STAR_RECORD_LEN = required_length(STAR_FIELDS)
DETAIL_RECORD_LEN = required_length(DETAIL_FIELDS)


def decode_star(
    path: Union[str, Path],
    line_number: int,
    line: str,
    primary_count: int,
    name_dictionary: Mapping[str, str],
) -> Star:
    values = decode_line(path, line_number, line, STAR_FIELDS)
    star = Star(
        number=primary_count + line_number,
        ra=ra_to_deg(values["ra_h"], values["ra_m"], values["ra_s"]),
        dec=dec_to_deg(
            values["dec_sign"], values["dec_d"], values["dec_m"], values["dec_s"]
        ),
        magnitude=values["magnitude"],
        color=values["color"],
        hd_number=values["hd_number"],
        sao_number=values["sao_number"],
        pm_ra=values["pm_ra"],
        pm_dec=values["pm_dec"],
    )
    return with_proper_name(star, name_dictionary)


def read_bsc4s_stars(
    path: Union[str, Path],
    primary_count: int,
    name_dictionary: Optional[Mapping[str, str]] = None,
    encoding: str = CATALOG_ENCODING,
    show_progress: bool = False,
) -> List[Star]:
    """Reads the supplement, one star per line"""
    if name_dictionary is None:
        name_dictionary = {}
    logger.info(f"Loading BSC4 supplement from {path}, numbering after {primary_count}")
    stars = []
    with Timer("read BSC4S"), open_catalog(path, encoding) as df:
        for line_number, line in iter_catalog_lines(df, "BSC4S", show_progress):
            stars.append(
                decode_star(path, line_number, line, primary_count, name_dictionary)
            )

    logger.info(f"BSC4S: {len(stars)} stars")
    return stars


def decode_details(path: Union[str, Path], line_number: int, line: str) -> StarDetail:
    values = decode_line(path, line_number, line, DETAIL_FIELDS)
    return StarDetail(spectral_class=values["spectral_class"])
