"""
The saved recipe record, along with the interfaces of the external services
which consume parsed recipes.

.. autoclass:: Recipe
    :members:

.. autofunction:: recipe_from_markdown

.. autoclass:: RecipeStore
    :members:

.. autoclass:: ShoppingListConsumer
    :members:
"""

from typing import Optional, Protocol

import time

from dataclasses import dataclass, field

from platefinder.metadata import extract_summary
from platefinder.shopping_list import IngredientOrder


__all__ = [
    "Recipe",
    "current_time_millis",
    "recipe_from_markdown",
    "RecipeStore",
    "ShoppingListConsumer",
]


def current_time_millis() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class Recipe:
    """A recipe as saved by the user."""

    title: str

    content: str
    """The complete markdown source of the recipe."""

    difficulty: str

    timestamp: int = field(default_factory=current_time_millis)
    """Creation time in milliseconds since the Unix epoch."""

    id: str = ""
    """
    Unique identifier. Defaults to the string form of :py:attr:`timestamp`.
    """

    def __post_init__(self) -> None:
        if not self.id:
            object.__setattr__(self, "id", str(self.timestamp))


def recipe_from_markdown(
    document: str,
    recipe_id: Optional[str] = None,
    timestamp: Optional[int] = None,
) -> Recipe:
    """
    Create a :py:class:`Recipe` from a generated markdown document, using
    :py:func:`~platefinder.metadata.extract_summary` for its title and
    difficulty.
    """
    summary = extract_summary(document)
    if timestamp is None:
        timestamp = current_time_millis()
    return Recipe(
        title=summary.title,
        content=document,
        difficulty=summary.difficulty,
        timestamp=timestamp,
        id=recipe_id if recipe_id is not None else "",
    )


class RecipeStore(Protocol):
    """Persistent storage of saved recipes."""

    def save_recipe(self, title: str, content: str, difficulty: str) -> None:
        ...


class ShoppingListConsumer(Protocol):
    """Receives shopping lists produced from recipes."""

    def submit_order(self, order: IngredientOrder) -> None:
        ...
