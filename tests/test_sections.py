import pytest

from typing import List

from platefinder.sections import split_sections, split_lines, find_section


PIZZA = "# Pizza\n## Ingredients\n- 2 cups flour\n- 1 tsp salt\n## Instructions\n1. Mix"


class TestSplitSections:
    def test_recipe(self) -> None:
        assert split_sections(PIZZA) == [
            "# Pizza\n",
            "Ingredients\n- 2 cups flour\n- 1 tsp salt\n",
            "Instructions\n1. Mix",
        ]

    @pytest.mark.parametrize(
        "document",
        ["", "# Just a title", "No headings\nat all\n", "#Not a heading"],
    )
    def test_no_marker(self, document: str) -> None:
        assert split_sections(document) == [document]

    def test_leading_marker(self) -> None:
        assert split_sections("## Ingredients\n- egg") == ["", "Ingredients\n- egg"]

    def test_adjacent_markers_are_not_merged(self) -> None:
        assert split_sections("## A\n## B\n") == ["", "A\n", "B\n"]

    def test_deeper_headings_also_split(self) -> None:
        assert split_sections("### Notes") == ["#", "Notes"]

    @pytest.mark.parametrize(
        "document",
        [PIZZA, "", "## A\n## B\n", "**Difficulty:** Easy"],
    )
    def test_resplitting_sections(self, document: str) -> None:
        for section in split_sections(document):
            assert split_sections(section) == [section]


class TestFindSection:
    @pytest.mark.parametrize(
        "heading, exp",
        [
            ("Ingredients", "Ingredients\n- 2 cups flour\n- 1 tsp salt\n"),
            ("Instructions", "Instructions\n1. Mix"),
            ("Details", None),
            # Prefix only
            ("Ingr", "Ingredients\n- 2 cups flour\n- 1 tsp salt\n"),
        ],
    )
    def test_find(self, heading: str, exp: str) -> None:
        assert find_section(split_sections(PIZZA), heading) == exp

    def test_first_match_wins(self) -> None:
        sections: List[str] = ["", "Ingredients (sauce)\n", "Ingredients\n"]
        assert find_section(sections, "Ingredients") == "Ingredients (sauce)\n"


@pytest.mark.parametrize(
    "text, exp",
    [
        ("", [""]),
        ("a", ["a"]),
        ("a\nb\n", ["a", "b", ""]),
        ("a\r\nb\r\n", ["a", "b", ""]),
        # Only "\n" ends a line
        ("a\x0cb c\x1cd", ["a\x0cb c\x1cd"]),
        ("a\rb", ["a\rb"]),
    ],
)
def test_split_lines(text: str, exp: List[str]) -> None:
    assert split_lines(text) == exp
