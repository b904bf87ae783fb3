"""
Proper name resolution against an externally supplied name dictionary
"""

import dataclasses
import logging
from typing import Mapping, Optional

from BrightStars.star import Star

logger = logging.getLogger("BrightStars.Names")


def resolve(star: Star, name_dictionary: Mapping[str, str]) -> Optional[str]:
    """
    Returns the proper name of the first identifier of the star
    found in the dictionary, None when nothing matches
    """
    for identifier in star.identifiers:
        proper_name = name_dictionary.get(identifier)
        if proper_name is not None:
            logger.debug(f"Found name {proper_name} for {identifier}")
            return proper_name
    return None


def with_proper_name(star: Star, name_dictionary: Mapping[str, str]) -> Star:
    proper_name = resolve(star, name_dictionary)
    if proper_name is None:
        return star
    return dataclasses.replace(star, proper_name=proper_name)
