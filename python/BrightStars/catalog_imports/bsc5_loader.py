"""
Yale Bright Star Catalogue, 5th revised edition (BSC5) loader.

https://cdsarc.cds.unistra.fr/viz-bin/cat/V/50

One star per line, HR number in the first columns.  Lines whose
discriminator column is blank are catalog entries that are not stars
(novae, extragalactic objects, removed entries).  They are kept as None
placeholders in the line indexed sequence so line N is always HR N.
"""

import logging
from pathlib import Path
from typing import List, Mapping, Optional, Union

from BrightStars.calc_utils import dec_to_deg, parse_float, parse_int, ra_to_deg
from BrightStars.errors import FormatError
from BrightStars.fixed_width import Field, char_at, required_length
from BrightStars.names import with_proper_name
from BrightStars.star import Star, StarDetail
from BrightStars.utils import Timer
from .catalog_import_utils import (
    CATALOG_ENCODING,
    decode_line,
    iter_catalog_lines,
    open_catalog,
)

logger = logging.getLogger("BrightStars.BSC5")

DISCRIMINATOR_COLUMN = 94

# Values of the variable star column that carry no designation
VARIABLE_PLACEHOLDERS = ("Var", "Var?")

STAR_FIELDS = (
    Field("number", 0, 4, parse_int),
    Field("name", 4, 10, raw=True),
    Field("hd_number", 25, 6, optional=True),
    Field("sao_number", 31, 6, parse_int, optional=True),
    Field("fk5_number", 37, 4, parse_int, optional=True),
    Field("variable_name", 51, 9, optional=True),
    Field("variable_prefix", 51, 3),
    Field("ra_h", 75, 2, parse_int),
    Field("ra_m", 77, 2, parse_int),
    Field("ra_s", 79, 4, parse_float),
    Field("dec_sign", 83, 1, raw=True),
    Field("dec_d", 84, 2, parse_int),
    Field("dec_m", 86, 2, parse_int),
    Field("dec_s", 88, 2, parse_int),
    Field("magnitude", 102, 5, parse_float),
    Field("color", 129, 1, raw=True),
    Field("pm_ra", 148, 6, parse_float, optional=True),
    Field("pm_dec", 154, 6, parse_float, optional=True),
)

DETAIL_FIELDS = (
    Field("is_infrared_source", 41, 1, lambda flag: flag == "I", raw=True),
    Field("spectral_class", 127, 20),
    Field("peculiarity", 147, 1),
    Field("radial_velocity", 166, 4, parse_int, optional=True),
)

STAR_RECORD_LEN = required_length(STAR_FIELDS)
DETAIL_RECORD_LEN = required_length(DETAIL_FIELDS)


def is_populated(path: Union[str, Path], line_number: int, line: str) -> bool:
    try:
        return char_at(line, DISCRIMINATOR_COLUMN) != " "
    except FormatError as e:
        raise FormatError(str(e), path, line_number) from e


def _variable_name(values) -> Optional[str]:
    variable_name = values["variable_name"]
    if variable_name is None or variable_name in VARIABLE_PLACEHOLDERS:
        return None
    # Bayer designations repeated in the variable column, e.g. "Alp Ori"
    if values["variable_prefix"] == values["name"][3:6].strip():
        return None
    return variable_name


def decode_star(
    path: Union[str, Path],
    line_number: int,
    line: str,
    name_dictionary: Mapping[str, str],
) -> Optional[Star]:
    """
    Decodes one BSC5 line, None for a placeholder line
    """
    if not is_populated(path, line_number, line):
        logger.debug(f"Line {line_number} has no star data, placeholder")
        return None

    values = decode_line(path, line_number, line, STAR_FIELDS)
    star = Star(
        number=values["number"],
        name=values["name"],
        ra=ra_to_deg(values["ra_h"], values["ra_m"], values["ra_s"]),
        dec=dec_to_deg(
            values["dec_sign"], values["dec_d"], values["dec_m"], values["dec_s"]
        ),
        magnitude=values["magnitude"],
        color=values["color"],
        hd_number=values["hd_number"],
        sao_number=values["sao_number"],
        fk5_number=values["fk5_number"],
        variable_name=_variable_name(values),
        pm_ra=values["pm_ra"],
        pm_dec=values["pm_dec"],
    )
    return with_proper_name(star, name_dictionary)


def read_bsc5_records(
    path: Union[str, Path],
    name_dictionary: Optional[Mapping[str, str]] = None,
    encoding: str = CATALOG_ENCODING,
    show_progress: bool = False,
) -> List[Optional[Star]]:
    """
    Reads the whole BSC5 file.  The result is line indexed: entry N-1
    belongs to line N and is None for lines without star data.
    """
    if name_dictionary is None:
        name_dictionary = {}
    logger.info(f"Loading BSC5 from {path}")
    records: List[Optional[Star]] = []
    with Timer("read BSC5"), open_catalog(path, encoding) as df:
        for line_number, line in iter_catalog_lines(df, "BSC5", show_progress):
            records.append(decode_star(path, line_number, line, name_dictionary))

    stars = sum(1 for star in records if star is not None)
    logger.info(f"BSC5: {len(records)} records, {stars} stars")
    return records


def decode_details(path: Union[str, Path], line_number: int, line: str) -> StarDetail:
    """
    Detail columns of any BSC5 line, blank for lines without star data
    """
    values = decode_line(path, line_number, line, DETAIL_FIELDS)
    return StarDetail(**values)
