from typing import Optional, Union

import re

from fractions import Fraction


Number = Union[int, float, Fraction]

fraction_pattern = re.compile(
    r"((?P<integer>[0-9]+)[ \t]+)?(?P<numerator>[0-9]+)[ \t]*/[ \t]*(?P<denominator>[0-9]+)"
)


def number(value: str) -> Number:
    """
    Attempt to parse a number formatted as a fraction (e.g. 9 3/4) float (e.g.
    3.14) or integer (e.g. 123). Throws a :py:exc:`ValueError` if this fails.
    """
    match = fraction_pattern.fullmatch(value)
    if match is not None:
        integer = int(match["integer"]) if match["integer"] is not None else 0
        numerator = int(match["numerator"])
        denominator = int(match["denominator"])
        if denominator == 0:
            raise ValueError(f"Zero denominator in {value!r}")
        return integer + Fraction(numerator, denominator)
    else:
        try:
            return int(value)
        except ValueError:
            return float(value)


def quantity_value(quantity: str) -> Optional[Number]:
    """
    Parse a raw ingredient quantity string (e.g. "2", "1/2" or "0.5") into a
    number. Returns None when the quantity is not a plain number (e.g. a range
    such as "2-3").
    """
    try:
        return number(quantity.strip())
    except ValueError:
        return None
