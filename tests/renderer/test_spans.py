import pytest

from typing import List

from platefinder.renderer.spans import (
    SpanStyle,
    StyledSpan,
    LINE_BREAK,
    render,
)


PLAIN = SpanStyle()
BOLD = SpanStyle(bold=True)
H1 = SpanStyle(bold=True, heading_level=1)
H2 = SpanStyle(bold=True, heading_level=2)


@pytest.mark.parametrize(
    "document, exp",
    [
        # Empty
        ("", [LINE_BREAK]),
        # Plain text
        ("Hello", [StyledSpan("Hello", PLAIN), LINE_BREAK]),
        # Bold
        (
            "**bold** normal",
            [StyledSpan("bold", BOLD), StyledSpan(" normal", PLAIN), LINE_BREAK],
        ),
        (
            "a **b** c **d** e",
            [
                StyledSpan("a ", PLAIN),
                StyledSpan("b", BOLD),
                StyledSpan(" c ", PLAIN),
                StyledSpan("d", BOLD),
                StyledSpan(" e", PLAIN),
                LINE_BREAK,
            ],
        ),
        # Unbalanced bold runs to the end of the line only
        (
            "a **b\nc",
            [
                StyledSpan("a ", PLAIN),
                StyledSpan("b", BOLD),
                LINE_BREAK,
                StyledSpan("c", PLAIN),
                LINE_BREAK,
            ],
        ),
        ("***", [StyledSpan("*", BOLD), LINE_BREAK]),
        # Headings
        ("# Pizza", [StyledSpan("Pizza", H1), LINE_BREAK]),
        ("## Ingredients", [StyledSpan("Ingredients", H2), LINE_BREAK]),
        ("   ## Indented", [StyledSpan("Indented", H2), LINE_BREAK]),
        # Headings aren't split on bold markers
        ("# **Big** pizza", [StyledSpan("**Big** pizza", H1), LINE_BREAK]),
        # Not headings
        ("#Pizza", [StyledSpan("#Pizza", PLAIN), LINE_BREAK]),
        ("### Notes", [StyledSpan("### Notes", PLAIN), LINE_BREAK]),
        # Blank lines
        ("a\n\nb", [
            StyledSpan("a", PLAIN),
            LINE_BREAK,
            LINE_BREAK,
            StyledSpan("b", PLAIN),
            LINE_BREAK,
        ]),
    ],
)
def test_render(document: str, exp: List[StyledSpan]) -> None:
    assert render(document) == exp


@pytest.mark.parametrize(
    "document",
    [
        "",
        "\n",
        "# Pizza\n## Ingredients\n- 2 cups flour\n\n**Difficulty:** Easy\n",
        "**unbalanced\n**\n***\n",
    ],
)
def test_one_line_break_per_line(document: str) -> None:
    spans = render(document)
    assert spans.count(LINE_BREAK) == document.count("\n") + 1
    assert spans[-1] == LINE_BREAK


def test_idempotent() -> None:
    document = "# Pizza\n**Difficulty:** Easy\n"
    assert render(document) == render(document)


def test_text_preserved() -> None:
    document = "Mix **well** and *serve*\n- 1 cup rice"
    assert "".join(span.text for span in render(document)) == (
        "Mix well and *serve*\n- 1 cup rice\n"
    )


def test_line_separators() -> None:
    assert render("**a**\r\nb\x0cc") == [
        StyledSpan("a", BOLD),
        LINE_BREAK,
        StyledSpan("b\x0cc", PLAIN),
        LINE_BREAK,
    ]
