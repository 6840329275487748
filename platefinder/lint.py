"""
Checks for generated recipe markdown which is missing expected structure.

Parsing never fails on malformed recipes: missing titles, difficulties and
ingredient sections are silently replaced by defaults (see
:py:mod:`platefinder.metadata` and :py:mod:`platefinder.shopping_list`). The
checks in this module make those substitutions visible, e.g. to help tune the
prompt given to the generation service.

.. autofunction:: check

Linting problems are described by :py:class:`Lint` objects:

.. autoclass:: Lint
    :members:
    :undoc-members:

.. autoclass:: LintKind
    :members:
    :undoc-members:
"""

from typing import AbstractSet, Iterator, Optional, Tuple

from dataclasses import dataclass

from enum import Enum, auto

from peggie.error_message_generation import offset_to_line_and_column

from platefinder.sections import (
    SECTION_MARKER,
    TITLE_MARKER,
    split_sections,
    split_lines,
)
from platefinder.metadata import (
    DIFFICULTY_MARKER,
    DEFAULT_DIFFICULTY,
    find_difficulty,
)
from platefinder.shopping_list import INGREDIENTS_HEADING, BULLET_MARKER
from platefinder.ingredient_parser import RULES
from platefinder.renderer.spans import BOLD_MARKER
from platefinder.staples import STAPLES, is_staple


class LintKind(Enum):
    """Kinds of lint."""

    missing_title = auto()
    missing_difficulty = auto()
    missing_ingredients = auto()
    empty_ingredients = auto()
    unmeasured_ingredient = auto()
    unbalanced_bold = auto()


@dataclass(frozen=True)
class Lint:
    """
    A description of a piece of lint found in a recipe.
    """

    kind: LintKind

    line: int
    """The (1-based) line number the problem relates to."""

    description: str


def iter_lines_with_numbers(document: str) -> Iterator[Tuple[int, str]]:
    for number, line in enumerate(split_lines(document), start=1):
        yield (number, line)


def line_of(document: str, offset: int) -> int:
    return offset_to_line_and_column(document, offset)[0]


def check_title(document: str) -> Iterator[Lint]:
    if TITLE_MARKER not in split_sections(document)[0]:
        yield Lint(
            kind=LintKind.missing_title,
            line=1,
            description="No '# ' title heading; the first line will be used as the title.",
        )


def check_difficulty(document: str) -> Iterator[Lint]:
    if find_difficulty(split_sections(document)) is not None:
        return

    offset = document.find(DIFFICULTY_MARKER)
    if offset < 0:
        yield Lint(
            kind=LintKind.missing_difficulty,
            line=1,
            description=(
                f"No '{DIFFICULTY_MARKER}' line; "
                f"difficulty will default to {DEFAULT_DIFFICULTY}."
            ),
        )
    else:
        yield Lint(
            kind=LintKind.missing_difficulty,
            line=line_of(document, offset),
            description=(
                f"No value given after '{DIFFICULTY_MARKER}'; "
                f"difficulty will default to {DEFAULT_DIFFICULTY}."
            ),
        )


def find_ingredients_offset(document: str) -> Optional[int]:
    """
    The offset of the start of the first "## Ingredients" heading text, or
    None if there isn't one.
    """
    offset = 0
    for i, section in enumerate(split_sections(document)):
        if i > 0:
            offset += len(SECTION_MARKER)
            if section.startswith(INGREDIENTS_HEADING):
                return offset
        offset += len(section)
    return None


def check_ingredients(
    document: str,
    staples: AbstractSet[str] = STAPLES,
) -> Iterator[Lint]:
    offset = find_ingredients_offset(document)
    if offset is None:
        yield Lint(
            kind=LintKind.missing_ingredients,
            line=1,
            description=f"No '{SECTION_MARKER}{INGREDIENTS_HEADING}' section.",
        )
        return

    section = split_sections(document[offset:])[0]
    first_line = line_of(document, offset)

    num_bullets = 0
    for number, line in iter_lines_with_numbers(section):
        if not line.startswith(BULLET_MARKER):
            continue
        num_bullets += 1

        ingredient = line[len(BULLET_MARKER) :].strip()
        if not ingredient or is_staple(ingredient, staples):
            continue
        if not any(rule(ingredient) is not None for rule in RULES):
            yield Lint(
                kind=LintKind.unmeasured_ingredient,
                line=first_line + number - 1,
                description=(
                    f"Ingredient '{ingredient}' has no recognised quantity; "
                    "it will be listed as 1 piece."
                ),
            )

    if num_bullets == 0:
        yield Lint(
            kind=LintKind.empty_ingredients,
            line=first_line,
            description=f"The {INGREDIENTS_HEADING} section lists no '{BULLET_MARKER}' items.",
        )


def check_bold(document: str) -> Iterator[Lint]:
    for number, line in iter_lines_with_numbers(document):
        stripped = line.lstrip()
        if stripped.startswith(TITLE_MARKER) or stripped.startswith(SECTION_MARKER):
            continue
        if line.count(BOLD_MARKER) % 2 != 0:
            yield Lint(
                kind=LintKind.unbalanced_bold,
                line=number,
                description=f"Unbalanced '{BOLD_MARKER}' marker.",
            )


def check(document: str, staples: AbstractSet[str] = STAPLES) -> Iterator[Lint]:
    """
    Check a recipe markdown document for structure which would be replaced by
    defaults during parsing. Produces :py:class:`Lint` objects in no
    particular order.
    """
    yield from check_title(document)
    yield from check_difficulty(document)
    yield from check_ingredients(document, staples)
    yield from check_bold(document)
