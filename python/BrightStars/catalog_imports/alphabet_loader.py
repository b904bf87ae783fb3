"""
Symbol table loader.

Reads `abbreviation = full name` pairs, one per line, e.g. the Greek
letter abbreviations used in Bayer designations.
"""

import logging
from pathlib import Path
from typing import Dict, Union

from BrightStars.errors import FormatError

logger = logging.getLogger("BrightStars.Alphabet")


def load_alphabet(path: Union[str, Path]) -> Dict[str, str]:
    """
    Returns the pairs in file order.  Blank lines are skipped, a
    repeated key replaces the earlier value.
    """
    alphabet: Dict[str, str] = {}
    with open(path, "r", encoding="utf-8") as df:
        for line_number, line in enumerate(df, 1):
            line = line.strip()
            if not line:
                continue

            chunks = line.split("=")
            if len(chunks) != 2:
                raise FormatError(
                    f"Expected exactly one '=' in {line!r}", path, line_number
                )
            key, value = chunks[0].strip(), chunks[1].strip()
            if key in alphabet:
                logger.warning(
                    f"{path}:{line_number}: duplicate key {key!r}, "
                    f"replacing {alphabet[key]!r} with {value!r}"
                )
            alphabet[key] = value

    logger.info(f"Loaded {len(alphabet)} symbols from {path}")
    return alphabet
