# Star and StarDetail records decoded from the bright star catalogs
from dataclasses import dataclass
from functools import cached_property
from typing import Optional, Tuple

from dataclasses_json import dataclass_json

NAME_LENGTH = 10
BLANK_NAME = " " * NAME_LENGTH


@dataclass_json
@dataclass(frozen=True)
class Star:
    """A single catalog entry, positions J2000 in degrees"""

    # HR number for BSC5 stars, continues after the BSC5 count for the supplement
    number: int
    # fixed width designation: Flamsteed(3) Bayer(3) superscript(1) constellation(3)
    name: str = BLANK_NAME
    ra: float = 0.0
    dec: float = 0.0
    magnitude: float = 0.0
    color: str = " "
    hd_number: Optional[str] = None
    sao_number: Optional[int] = None
    fk5_number: Optional[int] = None
    variable_name: Optional[str] = None
    # arcsec per year
    pm_ra: Optional[float] = None
    pm_dec: Optional[float] = None
    proper_name: Optional[str] = None

    @property
    def flamsteed(self) -> str:
        return self.name[0:3].strip()

    @property
    def bayer_letter(self) -> str:
        return self.name[3:6].strip()

    @property
    def bayer_index(self) -> str:
        return self.name[6:7].strip()

    @property
    def constellation(self) -> str:
        return self.name[7:10].strip()

    @cached_property
    def identifiers(self) -> Tuple[str, ...]:
        """
        Alternate designations of the star in name lookup priority order,
        e.g. ("Alp Lyr", "3 Lyr", "HD 172167", "SAO 67174", "FK5 699")
        """
        names = []
        if self.bayer_letter:
            names.append(
                f"{self.bayer_letter}{self.bayer_index} {self.constellation}".strip()
            )
        if self.flamsteed:
            names.append(f"{self.flamsteed} {self.constellation}".strip())
        if self.hd_number:
            names.append(f"HD {self.hd_number}")
        if self.sao_number is not None:
            names.append(f"SAO {self.sao_number}")
        if self.fk5_number is not None:
            names.append(f"FK5 {self.fk5_number}")
        if self.variable_name:
            names.append(self.variable_name)
        return tuple(names)

    def __str__(self):
        label = self.proper_name or next(iter(self.identifiers), "")
        return f"{self.number} {label}".strip()


@dataclass_json
@dataclass
class StarDetail:
    """Rarely needed attributes, read from the catalog file on request"""

    spectral_class: str = ""
    peculiarity: str = ""
    # km/s
    radial_velocity: Optional[int] = None
    is_infrared_source: bool = False
