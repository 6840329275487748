import pytest

from textwrap import dedent

from platefinder.ingredient_parser import ParsedIngredient
from platefinder.staples import STAPLES, is_staple
from platefinder.shopping_list import IngredientOrder, extract_order


PIZZA = "# Pizza\n## Ingredients\n- 2 cups flour\n- 1 tsp salt\n## Instructions\n1. Mix"

CURRY = dedent(
    """
    # Chicken curry

    ## Ingredients
    - 2 tablespoons vegetable oil
    - 1 large onion
    - 3 cloves garlic
    - 1 (400-gram) tin of tomatoes
    - 500 g chicken thighs
    - Salt and pepper to taste
    - fresh coriander
    - 3 cloves garlic

    ## Instructions
    - 1 extra step which is not an ingredient
    1. Fry the onion.

    ## Details
    **Difficulty:** Easy
    """
).lstrip()


def test_staples_omitted() -> None:
    # NB: flour and salt are both staples
    assert extract_order(PIZZA, "r1") == IngredientOrder("r1", ())


def test_recipe() -> None:
    order = extract_order(CURRY, "curry-1")
    assert order.recipe_id == "curry-1"
    assert order.ingredients == (
        ParsedIngredient("1", "large", "onion"),
        ParsedIngredient("3", "cloves", "garlic"),
        ParsedIngredient("1", "400-gram", "tin of tomatoes"),
        ParsedIngredient("500", "g", "chicken thighs"),
        ParsedIngredient("1", "piece", "fresh coriander"),
        # Duplicates are retained
        ParsedIngredient("3", "cloves", "garlic"),
    )


def test_never_includes_staples() -> None:
    for ingredient in extract_order(CURRY, "x").ingredients:
        assert not is_staple(ingredient.name)


def test_measured_staple_omitted() -> None:
    order = extract_order("## Ingredients\n- 8 oz fresh mozzarella\n", "r")
    assert order.ingredients == (ParsedIngredient("8", "oz", "fresh mozzarella"),)


def test_fallback_staple_omitted() -> None:
    order = extract_order("## Ingredients\n- olive oil for cooking\n", "r")
    assert order.ingredients == ()


def test_only_name_checked_for_staples() -> None:
    # The units contain "oil" but the names do not
    order = extract_order("## Ingredients\n- 1 oily fish\n- 2 foil parcels\n", "r")
    assert order.ingredients == (
        ParsedIngredient("1", "oily", "fish"),
        ParsedIngredient("2", "foil", "parcels"),
    )


@pytest.mark.parametrize(
    "document",
    [
        "",
        "# Toast",
        "# Toast\n## Method\n- 1 slice bread\n",
        # Heading must be an "## " heading
        "# Toast\nIngredients\n- 1 slice bread\n",
        # Ingredients section without any bullets
        "## Ingredients\n",
        "## Ingredients\n1. One slice bread\n* 2 slices cheese\n",
    ],
)
def test_empty(document: str) -> None:
    assert extract_order(document, "empty") == IngredientOrder("empty", ())


def test_only_top_level_bullets() -> None:
    order = extract_order(
        "## Ingredients\n  - 1 nested thing\n-1 no space\n- 2 slices bread\n- \n", "r"
    )
    assert order.ingredients == (ParsedIngredient("2", "slices", "bread"),)


def test_first_ingredients_section_used() -> None:
    order = extract_order(
        "## Ingredients for the base\n- 2 slices bread\n"
        "## Ingredients\n- 1 cup cheese\n",
        "r",
    )
    assert order.ingredients == (ParsedIngredient("2", "slices", "bread"),)


def test_windows_line_endings() -> None:
    order = extract_order("## Ingredients\r\n- 2 slices bread\r\n", "r")
    assert order.ingredients == (ParsedIngredient("2", "slices", "bread"),)


def test_custom_staples() -> None:
    order = extract_order(CURRY, "r", STAPLES | {"garlic", "onion"})
    assert [i.name for i in order.ingredients] == [
        "tin of tomatoes",
        "chicken thighs",
        "fresh coriander",
    ]


def test_to_dict() -> None:
    order = IngredientOrder(
        "r1",
        (
            ParsedIngredient("1", "large", "onion"),
            ParsedIngredient("1", "piece", "fresh coriander"),
        ),
    )
    assert order.to_dict() == {
        "recipeId": "r1",
        "ingredients": [
            {"quantity": "1", "unit": "large", "name": "onion"},
            {"quantity": "1", "unit": "piece", "name": "fresh coriander"},
        ],
    }
    assert IngredientOrder("r2").to_dict() == {"recipeId": "r2", "ingredients": []}


def test_form_feed_does_not_split_lines() -> None:
    order = extract_order("## Ingredients\n- 2 cups rice\x0c- 1 kg beef\n", "r")
    assert order.ingredients == (ParsedIngredient("2", "cups", "rice\x0c- 1 kg beef"),)
