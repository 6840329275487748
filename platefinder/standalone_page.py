"""
Generates a stand alone HTML page for a single recipe.
"""

from typing import AbstractSet, Optional

import logging

from pathlib import Path

from platefinder.exceptions import RecipeFileError, OutputFileError
from platefinder.metadata import extract_summary
from platefinder.shopping_list import extract_order
from platefinder.staples import STAPLES
from platefinder.recipe import current_time_millis
from platefinder.renderer import render, render_spans_html
from platefinder.templates import standalone_recipe_template


logger = logging.getLogger(__name__)


def read_recipe_markdown(input_file: Path) -> str:
    """
    Read a markdown recipe file, raising :py:exc:`RecipeFileError` on failure.
    """
    try:
        with input_file.open(encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise RecipeFileError(f"Could not read {input_file}: {e}")


def write_html(output_file: Path, html: str) -> None:
    """
    Write a generated HTML page as UTF-8, raising :py:exc:`OutputFileError` on
    failure.
    """
    try:
        with output_file.open("w", encoding="utf-8") as f:
            f.write(html)
    except OSError as e:
        raise OutputFileError(f"Could not write {output_file}: {e}")


def generate_standalone_page(
    markdown: str,
    recipe_id: Optional[str] = None,
    staples: AbstractSet[str] = STAPLES,
) -> str:
    """
    Generate a standalone page with a rendered markdown recipe followed by its
    shopping list.

    Parameters
    ==========
    markdown : str
        The recipe markdown.
    recipe_id : str or None
        The ID to use for the shopping list. Defaults to the current time in
        milliseconds.
    staples : {str, ...}
        Ingredients to leave off the shopping list.
    """
    if recipe_id is None:
        recipe_id = str(current_time_millis())

    summary = extract_summary(markdown)
    order = extract_order(markdown, recipe_id, staples)
    logger.info(
        "Rendering '%s' with %d shopping list items.",
        summary.title,
        len(order.ingredients),
    )

    return standalone_recipe_template.render(
        title=summary.title or "Recipe",
        difficulty=summary.difficulty,
        body=render_spans_html(render(markdown)),
        order=order,
    )


def generate_standalone_page_from_file(
    input_file: Path,
    recipe_id: Optional[str] = None,
    staples: AbstractSet[str] = STAPLES,
) -> str:
    """
    As :py:func:`generate_standalone_page` but reading the markdown from a file.
    """
    return generate_standalone_page(
        read_recipe_markdown(input_file), recipe_id=recipe_id, staples=staples
    )
