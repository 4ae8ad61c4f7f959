"""
Input parsing: one mine per line, "X Y power"

Lines get sequential IDs starting at 1 in read order. Any malformed line
or invalid mine aborts the whole load.
"""
from typing import BinaryIO, Iterable, TextIO, Union
import logging
import math
import re

import numpy as np

from minefield.config import FIELDS_PER_LINE
from minefield.errors import ParseError
from minefield.field import Field
from minefield.models import Mine

logger = logging.getLogger(__name__)

FIELD_NAMES = ("X coord", "Y coord", "power")

# float literals without digit separators
DECIMAL_FLOAT = re.compile(
    r"[+-]?(?:\d+\.?\d*(?:e[+-]?\d+)?|\.\d+(?:e[+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE | re.ASCII
)
HEX_FLOAT = re.compile(
    r"[+-]?0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)p[+-]?\d+",
    re.IGNORECASE | re.ASCII
)


def _parse_float(text: str, name: str, line: str, line_number: int) -> np.float32:
    if DECIMAL_FLOAT.fullmatch(text):
        value = float(text)
    elif HEX_FLOAT.fullmatch(text):
        try:
            value = float.fromhex(text)
        except OverflowError:
            value = -math.inf if text.startswith("-") else math.inf
    else:
        raise ParseError(
            f"line {line_number} '{line}' invalid float for {name}: {text}",
            line=line,
            line_number=line_number,
            field=name
        )

    # overflow is judged after rounding to single precision
    with np.errstate(over="ignore"):
        single = np.float32(value)
    if np.isinf(single) and "inf" not in text.lower():
        raise ParseError(
            f"line {line_number} '{line}' {name} out of single precision range: {text}",
            line=line,
            line_number=line_number,
            field=name
        )
    return single


def _decode(line: Union[str, bytes], line_number: int) -> str:
    if isinstance(line, str):
        return line
    try:
        return line.decode("utf-8")
    except UnicodeDecodeError as e:
        text = line.decode("utf-8", errors="replace").rstrip("\r\n")
        raise ParseError(
            f"line {line_number} '{text}' is not valid UTF-8: {e}",
            line=text,
            line_number=line_number
        ) from None


def parse_line(line: str, line_number: int) -> Mine:
    """Parse one input line into a mine with ID `line_number`"""
    line = line.rstrip("\r\n")
    fields = line.split()
    if len(fields) != FIELDS_PER_LINE:
        raise ParseError(
            f"line {line_number} '{line}' does not have {FIELDS_PER_LINE} fields: {len(fields)}",
            line=line,
            line_number=line_number
        )

    x, y, power = (
        _parse_float(text, name, line, line_number)
        for text, name in zip(fields, FIELD_NAMES)
    )
    return Mine(id=line_number, x=x, y=y, power=power)


def parse_data(data: Union[TextIO, BinaryIO, Iterable[Union[str, bytes]]]) -> Field:
    """
    Build a field from lines of input data (text, or UTF-8 encoded bytes).

    Raises:
        ParseError: Malformed line
        ValidationError: Mine rejected by the field
    """
    field = Field()
    for line_number, line in enumerate(data, start=1):
        field.add_mine(parse_line(_decode(line, line_number), line_number))

    logger.debug(f"Parsed {len(field)} mines")
    return field


def load_field(path: str) -> Field:
    """
    Read and parse an input file.

    Raises:
        OSError: File cannot be opened
        ParseError: Malformed line
        ValidationError: Mine rejected by the field
    """
    with open(path, "rb") as stream:
        return parse_data(stream)
