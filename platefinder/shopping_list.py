"""
Extraction of a shopping list from the "Ingredients" section of generated
recipe markdown.

.. autoclass:: IngredientOrder
    :members:

.. autofunction:: extract_order
"""

from typing import AbstractSet, Any, Dict, Iterator, Tuple

import logging

from dataclasses import dataclass

from platefinder.sections import split_sections, split_lines, find_section
from platefinder.ingredient_parser import ParsedIngredient, parse_line
from platefinder.staples import STAPLES, is_staple


__all__ = [
    "INGREDIENTS_HEADING",
    "BULLET_MARKER",
    "IngredientOrder",
    "iter_ingredient_lines",
    "extract_order",
]


logger = logging.getLogger(__name__)


INGREDIENTS_HEADING = "Ingredients"

BULLET_MARKER = "- "


@dataclass(frozen=True)
class IngredientOrder:
    """The non-staple ingredients required by a recipe, in recipe order."""

    recipe_id: str
    """Opaque identifier supplied by the caller."""

    ingredients: Tuple[ParsedIngredient, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert into a JSON-serialisable dictionary."""
        return {
            "recipeId": self.recipe_id,
            "ingredients": [
                {
                    "quantity": ingredient.quantity,
                    "unit": ingredient.unit,
                    "name": ingredient.name,
                }
                for ingredient in self.ingredients
            ],
        }


def iter_ingredient_lines(section: str) -> Iterator[str]:
    """
    Iterate over the bulleted lines of an ingredients section with the bullet
    removed.
    """
    for line in split_lines(section):
        if line.startswith(BULLET_MARKER):
            yield line[len(BULLET_MARKER) :].strip()


def extract_order(
    document: str,
    recipe_id: str,
    staples: AbstractSet[str] = STAPLES,
) -> IngredientOrder:
    """
    Build a shopping list from the "## Ingredients" section of a document.

    Every "- " bulleted line in the section is parsed with
    :py:func:`~platefinder.ingredient_parser.parse_line`. Blank lines and
    ingredients whose name is a staple (see
    :py:func:`~platefinder.staples.is_staple`) are omitted. Ingredients are
    listed in the order they appear and duplicates are retained.

    If the document has no ingredients section, the order is empty.
    """
    section = find_section(split_sections(document), INGREDIENTS_HEADING)
    if section is None:
        logger.debug("No %s section found in recipe %s.", INGREDIENTS_HEADING, recipe_id)
        return IngredientOrder(recipe_id)

    ingredients = []
    for line in iter_ingredient_lines(section):
        ingredient = parse_line(line)
        if ingredient is None:
            continue
        if is_staple(ingredient.name, staples):
            logger.debug("Omitting staple ingredient '%s'.", ingredient.name)
            continue
        ingredients.append(ingredient)

    logger.debug("Found %d ingredients for recipe %s.", len(ingredients), recipe_id)
    return IngredientOrder(recipe_id, tuple(ingredients))
