"""
Extraction of recipe summary information (title and difficulty) from generated
recipe markdown.

.. autoclass:: RecipeSummary
    :members:

.. autofunction:: extract_summary
"""

from typing import List, Optional

import re

import logging

from dataclasses import dataclass

from platefinder.sections import TITLE_MARKER, split_sections, split_lines


__all__ = [
    "DIFFICULTY_MARKER",
    "DEFAULT_DIFFICULTY",
    "RecipeSummary",
    "extract_title",
    "find_difficulty",
    "extract_difficulty",
    "extract_summary",
]


logger = logging.getLogger(__name__)


DIFFICULTY_MARKER = "**Difficulty:**"

DEFAULT_DIFFICULTY = "Medium"

# Whitespace and emphasis around the difficulty value, e.g. "**Hard**"
surrounding_emphasis_pattern = re.compile(r"^[\s*_]+|[\s*_]+$")


@dataclass(frozen=True)
class RecipeSummary:
    title: str
    difficulty: str = DEFAULT_DIFFICULTY


def extract_title(document: str, sections: List[str]) -> str:
    """
    The text following the first "# " in the first section, or, failing that,
    the first line of the document.
    """
    head = sections[0]
    start = head.find(TITLE_MARKER)
    if start >= 0:
        return head[start + len(TITLE_MARKER) :].split("\n", 1)[0].strip()

    logger.debug("No title heading found, using first line as title.")
    return document.split("\n", 1)[0].strip()


def find_difficulty(sections: List[str]) -> Optional[str]:
    """
    The value following "**Difficulty:**" on the first line mentioning it,
    with surrounding whitespace and emphasis removed. None if there is no such
    line or the value is blank.
    """
    for section in sections:
        if DIFFICULTY_MARKER not in section:
            continue
        for line in split_lines(section):
            if DIFFICULTY_MARKER in line:
                value = line.split(DIFFICULTY_MARKER, 1)[1]
                return surrounding_emphasis_pattern.sub("", value) or None
    return None


def extract_difficulty(sections: List[str]) -> str:
    """
    The value following "**Difficulty:**" in the first section mentioning
    it, or :py:data:`DEFAULT_DIFFICULTY`.
    """
    difficulty = find_difficulty(sections)
    if difficulty is None:
        logger.debug("No difficulty given, defaulting to %s.", DEFAULT_DIFFICULTY)
        return DEFAULT_DIFFICULTY
    return difficulty


def extract_summary(document: str) -> RecipeSummary:
    """
    Extract the title and difficulty of a recipe markdown document.

    Never fails: missing structure results in the documented defaults.
    """
    sections = split_sections(document)
    return RecipeSummary(
        title=extract_title(document, sections),
        difficulty=extract_difficulty(sections),
    )
