"""
Splitting of generated recipe markdown into sections delimited by level-2
headings.

Given a document like::

    # Margherita pizza

    ## Ingredients
    - 2 cups flour

    ## Instructions
    1. Mix

:py:func:`split_sections` produces three sections: the text before the first
"## " (containing the title), then "Ingredients\\n- 2 cups flour\\n\\n" and
"Instructions\\n1. Mix". Note that the "## " marker itself is consumed so each
section begins with its heading text.
"""

from typing import List, Optional


__all__ = [
    "SECTION_MARKER",
    "TITLE_MARKER",
    "split_sections",
    "find_section",
    "split_lines",
]


SECTION_MARKER = "## "
TITLE_MARKER = "# "


def split_sections(document: str) -> List[str]:
    """
    Split a markdown document on every "## " marker.

    The first section is everything before the first marker (and is the whole
    document when no marker is present). Never fails.
    """
    return document.split(SECTION_MARKER)


def split_lines(text: str) -> List[str]:
    """
    Split text into lines on "\n", removing the "\r" of any "\r\n" line
    endings. Other line separators (e.g. form feeds) are left in place.
    """
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def find_section(sections: List[str], heading: str) -> Optional[str]:
    """Return the first section whose text begins with ``heading``, if any."""
    for section in sections:
        if section.startswith(heading):
            return section
    return None
