"""
A line-oriented renderer for the small subset of markdown produced by the
recipe generation service:

* Lines starting with "# " are rendered as level 1 headings.
* Lines starting with "## " are rendered as level 2 headings.
* Text between pairs of "**" is rendered in bold.

Each source line is rendered independently: an unterminated "**" makes the
rest of its line bold but never affects the following line.

.. autofunction:: render

.. autoclass:: StyledSpan
    :members:

.. autoclass:: SpanStyle
    :members:
"""

from typing import Iterator, List

from dataclasses import dataclass, field

from platefinder.sections import split_lines


__all__ = [
    "BOLD_MARKER",
    "SpanStyle",
    "StyledSpan",
    "LINE_BREAK",
    "render_line",
    "render",
]


BOLD_MARKER = "**"

HEADING_MARKERS = (
    ("# ", 1),
    ("## ", 2),
)


@dataclass(frozen=True)
class SpanStyle:
    bold: bool = False

    heading_level: int = 0
    """1 for the largest headings, 2 for subheadings and 0 for body text."""


@dataclass(frozen=True)
class StyledSpan:
    text: str
    style: SpanStyle = field(default_factory=SpanStyle)


LINE_BREAK = StyledSpan("\n")
"""The span which terminates every rendered line."""


def render_line(line: str) -> Iterator[StyledSpan]:
    """
    Render a single line of markdown (excluding the trailing line break).
    """
    stripped = line.lstrip()
    for marker, level in HEADING_MARKERS:
        if stripped.startswith(marker):
            yield StyledSpan(
                line.split(marker, 1)[1],
                SpanStyle(bold=True, heading_level=level),
            )
            return

    for i, segment in enumerate(line.split(BOLD_MARKER)):
        if segment:
            yield StyledSpan(segment, SpanStyle(bold=i % 2 == 1))


def render(document: str) -> List[StyledSpan]:
    """
    Render a markdown document into a flat list of :py:class:`StyledSpan`
    objects, one :py:data:`LINE_BREAK` following the spans of each line.

    For example::

        >>> render("**Difficulty:** Easy")
        [StyledSpan(text='Difficulty:', style=SpanStyle(bold=True, heading_level=0)),
         StyledSpan(text=' Easy', style=SpanStyle(bold=False, heading_level=0)),
         StyledSpan(text='\\n', style=SpanStyle(bold=False, heading_level=0))]
    """
    spans: List[StyledSpan] = []
    for line in split_lines(document):
        spans.extend(render_line(line))
        spans.append(LINE_BREAK)
    return spans
