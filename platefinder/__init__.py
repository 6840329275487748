"""
Extraction of structured data from the markdown recipes produced by a recipe
generation service: a recipe summary, a shopping list of the ingredients which
need to be bought and a styled rendering for display.
"""

__version__ = "1.0"

from platefinder.sections import split_sections
from platefinder.metadata import RecipeSummary, extract_summary
from platefinder.ingredient_parser import ParsedIngredient, parse_line
from platefinder.shopping_list import IngredientOrder, extract_order
from platefinder.staples import STAPLES, is_staple
from platefinder.recipe import Recipe, recipe_from_markdown
from platefinder.renderer import SpanStyle, StyledSpan, render
