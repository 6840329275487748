"""
Kitchen staples are ingredients assumed to be available in any kitchen (salt,
cooking oil, water and so on). They are excluded from generated shopping lists.

.. autodata:: STAPLES

.. autofunction:: is_staple
"""

from typing import AbstractSet, FrozenSet


__all__ = [
    "BASIC_SEASONINGS",
    "COOKING_OILS",
    "PANTRY_BASICS",
    "STAPLES",
    "is_staple",
]


BASIC_SEASONINGS: FrozenSet[str] = frozenset(
    [
        "salt",
        "pepper",
        "black pepper",
        "kosher salt",
        "garlic powder",
        "onion powder",
        "dried oregano",
        "dried basil",
        "ground cumin",
        "paprika",
    ]
)

COOKING_OILS: FrozenSet[str] = frozenset(
    [
        "olive oil",
        "vegetable oil",
        "canola oil",
        "cooking oil",
        "oil",
        "cooking spray",
    ]
)

PANTRY_BASICS: FrozenSet[str] = frozenset(
    [
        "water",
        "flour",
        "sugar",
        "brown sugar",
        "baking powder",
        "baking soda",
        "vanilla extract",
    ]
)

STAPLES: FrozenSet[str] = BASIC_SEASONINGS | COOKING_OILS | PANTRY_BASICS
"""
All known staples, in normalised (lower case, trimmed) form.
"""


def normalise(name: str) -> str:
    return name.lower().strip()


def is_staple(name: str, staples: AbstractSet[str] = STAPLES) -> bool:
    """
    Test whether an ingredient name refers to a kitchen staple.

    The (lower-cased, trimmed) name is a staple if it contains any of the
    ``staples`` as a substring or if it ends with "to taste" (e.g. "salt and
    pepper to taste").

    .. note::

        Because this is a substring match, names which merely contain a staple
        word are also treated as staples. For example "saltfish" contains
        "salt" and "sugar snap peas" contains "sugar".
    """
    normalised = normalise(name)
    if normalised.endswith("to taste"):
        return True
    return any(normalise(staple) in normalised for staple in staples)
