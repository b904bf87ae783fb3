"""
Fixed column record decoding.

Both catalogs are plain text files where every field lives at a known
column offset.  A format is described by a table of Field entries and
decoded in one go by decode_record().
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional

from BrightStars.errors import FormatError


def slice_field(line: str, offset: int, length: int) -> str:
    """Returns the raw columns [offset, offset + length) of a line"""
    if offset + length > len(line):
        raise FormatError(
            f"Line of length {len(line)} is too short for columns "
            f"{offset}-{offset + length}"
        )
    return line[offset : offset + length]


def extract(line: str, offset: int, length: int) -> str:
    return slice_field(line, offset, length).strip()


def extract_optional(line: str, offset: int, length: int) -> Optional[str]:
    """Blank (space filled) columns are absent, returned as None"""
    text = extract(line, offset, length)
    if not text:
        return None
    return text


def char_at(line: str, index: int) -> str:
    return slice_field(line, index, 1)


@dataclass(frozen=True)
class Field:
    """
    One column of a fixed width record.

    raw fields are passed to the decoder untrimmed (fixed width names,
    single flag characters).  optional fields decode to None when blank,
    other blank fields are handed to the decoder as an empty string, so
    numeric decoders reject them.
    """

    name: str
    offset: int
    length: int = 1
    decoder: Callable[[str], Any] = str
    optional: bool = False
    raw: bool = False

    @property
    def end(self) -> int:
        return self.offset + self.length

    def decode(self, line: str) -> Any:
        if self.raw:
            return self.decoder(slice_field(line, self.offset, self.length))
        if self.optional:
            text = extract_optional(line, self.offset, self.length)
            if text is None:
                return None
            return self.decoder(text)
        return self.decoder(extract(line, self.offset, self.length))


def required_length(fields: Iterable[Field]) -> int:
    return max(f.end for f in fields)


def decode_record(line: str, fields: Iterable[Field]) -> Dict[str, Any]:
    """
    Decodes every field of a table, keyed by field name.
    Raises FormatError naming the offending field.
    """
    values = {}
    for field in fields:
        try:
            values[field.name] = field.decode(line)
        except FormatError as e:
            raise FormatError(f"{field.name}: {e}") from e
    return values
