"""
Parsing of individual ingredient lines (e.g. "2 cups flour") into quantity,
unit and name strings.

.. autoclass:: ParsedIngredient
    :members:

.. autofunction:: parse_line

Lines are matched against the rules in :py:data:`RULES` in order, the first
matching rule winning. Lines matching no rule are treated as a single 'piece'
of the named ingredient.
"""

from typing import Callable, Match, Optional, Pattern, Tuple

import re

from dataclasses import dataclass

from platefinder.number_parser import Number, quantity_value


__all__ = [
    "ParsedIngredient",
    "Rule",
    "RULES",
    "FALLBACK_QUANTITY",
    "FALLBACK_UNIT",
    "parse_line",
]


@dataclass(frozen=True)
class ParsedIngredient:
    """An ingredient with its quantity and unit kept as raw strings."""

    quantity: str
    """The quantity as written, e.g. "2", "1/2" or "0.5"."""

    unit: str
    """
    The unit as written, e.g. "cups" or "8-ounce". For ingredients without an
    explicit measure this is "piece".
    """

    name: str

    @property
    def quantity_value(self) -> Optional[Number]:
        """The quantity as a number, or None if it is not a plain number."""
        return quantity_value(self.quantity)

    def __str__(self) -> str:
        return f"{self.quantity} {self.unit} {self.name}"


Rule = Callable[[str], Optional[ParsedIngredient]]
"""
A parsing rule: takes a trimmed ingredient line and returns a
:py:class:`ParsedIngredient` or None if the rule does not apply.
"""


FALLBACK_QUANTITY = "1"
FALLBACK_UNIT = "piece"


def _from_match(match: Optional[Match[str]]) -> Optional[ParsedIngredient]:
    if match is None:
        return None
    quantity, unit, name = match.groups()
    return ParsedIngredient(
        quantity=quantity.strip(),
        unit=unit.strip(),
        name=name.strip(),
    )


def regex_rule(pattern: Pattern[str]) -> Rule:
    """
    Make a :py:data:`Rule` from a regex with three groups: quantity, unit and
    name.
    """

    def rule(line: str) -> Optional[ParsedIngredient]:
        return _from_match(pattern.match(line))

    rule.__name__ = f"regex_rule({pattern.pattern!r})"
    return rule


# e.g. "2 tablespoons olive oil", "1/2 cup milk", "0.5 kg potatoes"
numeric_quantity_with_unit = regex_rule(
    re.compile(r"^(\d+(?:/\d+)?(?:\.\d+)?)\s+(\w+)\s+(.+)$")
)

# e.g. "1 (8-ounce) steak"
parenthesised_unit = regex_rule(re.compile(r"^(\d+)\s+\((\d+(?:-\w+)?)\)\s+(.+)$"))

# e.g. "1 large onion"
integer_quantity_with_unit = regex_rule(re.compile(r"^(\d+)\s+(\w+)\s+(.+)$"))


RULES: Tuple[Rule, ...] = (
    numeric_quantity_with_unit,
    parenthesised_unit,
    integer_quantity_with_unit,
)
"""
The ingredient line parsing rules in priority order. More specific patterns
must come before more general ones.
"""


def parse_line(line: str) -> Optional[ParsedIngredient]:
    """
    Parse a single ingredient line (with any leading "- " bullet already
    removed).

    Returns None for blank lines. Lines which match none of the
    :py:data:`RULES` are returned as one "piece" of an ingredient named by the
    whole line, e.g. "olive oil for cooking" becomes ("1", "piece", "olive oil
    for cooking").
    """
    line = line.strip()
    if not line:
        return None

    for rule in RULES:
        ingredient = rule(line)
        if ingredient is not None:
            return ingredient

    return ParsedIngredient(quantity=FALLBACK_QUANTITY, unit=FALLBACK_UNIT, name=line)
