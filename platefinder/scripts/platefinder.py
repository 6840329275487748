"""
The ``platefinder`` command parses a generated recipe markdown file and prints
its summary and shopping list.

.. highlight:: bash

Basic usage
===========

.. code:: text

    $ platefinder RECIPE_SOURCE

This prints the recipe title, difficulty and the ingredients which need to be
bought (i.e. excluding kitchen staples such as salt and oil).

Machine readable output
=======================

With ``--json`` the recipe record and shopping list are instead printed as a
JSON object with keys ``recipe`` and ``order``. The shopping list is
identified by the value given with ``--recipe-id`` (defaulting to the current
time in milliseconds).

Additional staples
==================

Ingredients you always have to hand can be left off the shopping list using
``--staple`` (or ``-s``), which may be given multiple times.

HTML output
===========

Use ``--html OUTPUT_FILENAME`` to also write a standalone HTML page containing
the rendered recipe and its shopping list.
"""

import sys

import json

import logging

from argparse import ArgumentParser

from dataclasses import asdict

from pathlib import Path

from platefinder.exceptions import PlatefinderError
from platefinder.recipe import recipe_from_markdown
from platefinder.shopping_list import extract_order
from platefinder.staples import STAPLES, normalise
from platefinder.standalone_page import (
    read_recipe_markdown,
    generate_standalone_page,
    write_html,
)


def configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(name)s: %(message)s",
    )


def main() -> None:
    parser = ArgumentParser(
        description="""
            Extract the title, difficulty and shopping list from a generated
            recipe markdown file.
        """,
    )

    parser.add_argument(
        "recipe",
        type=Path,
        help="""
            The filename of the recipe markdown file to parse.
        """,
    )

    parser.add_argument(
        "--recipe-id",
        "-r",
        default=None,
        help="""
            The identifier to give the shopping list. Defaults to the current
            time in milliseconds.
        """,
    )

    parser.add_argument(
        "--json",
        "-j",
        action="store_true",
        default=False,
        help="""
            Print the recipe and shopping list as JSON.
        """,
    )

    parser.add_argument(
        "--html",
        type=Path,
        metavar="OUTPUT",
        default=None,
        help="""
            Also write a standalone HTML page for the recipe to the named file.
        """,
    )

    parser.add_argument(
        "--staple",
        "-s",
        action="extend",
        default=[],
        nargs="+",
        help="""
            Additional ingredients to treat as kitchen staples and leave off
            the shopping list.
        """,
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="""
            Log more details. May be given twice for debugging output.
        """,
    )

    args = parser.parse_args()

    configure_logging(args.verbose)

    staples = STAPLES | frozenset(normalise(staple) for staple in args.staple)

    try:
        markdown = read_recipe_markdown(args.recipe)
    except PlatefinderError as e:
        sys.stderr.write(f"{e}\n")
        sys.exit(1)

    recipe = recipe_from_markdown(markdown, recipe_id=args.recipe_id)
    order = extract_order(markdown, recipe.id, staples)

    if args.json:
        print(json.dumps({"recipe": asdict(recipe), "order": order.to_dict()}, indent=2))
    else:
        print(recipe.title)
        print(f"Difficulty: {recipe.difficulty}")
        print()
        if order.ingredients:
            print("Shopping list:")
            for ingredient in order.ingredients:
                print(f"- {ingredient}")
        else:
            print("Nothing to buy.")

    if args.html is not None:
        html = generate_standalone_page(markdown, recipe_id=recipe.id, staples=staples)
        try:
            write_html(args.html, html)
        except PlatefinderError as e:
            sys.stderr.write(f"{e}\n")
            sys.exit(1)


if __name__ == "__main__":
    main()
