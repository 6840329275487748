"""
The ``platefinder-lint`` command checks generated recipe markdown files for
missing structure which would otherwise be silently replaced by defaults (e.g.
a missing difficulty defaulting to 'Medium').

Usage::

    $ platefinder-lint FILENAME [...]

If any potential issues are found, explanations will be printed to stdout and
a non-zero exit status will be returned. Otherwise, no messages will be
produced and the exit status will be 0.

You can suppress warnings of a specific kind using the ``--ignore`` or ``-i``
argument. Warning types are indicated in square brackets in warning messages.
This argument may be used multiple times to ignore multiple kinds of warning.
"""

import sys

from argparse import ArgumentParser

from pathlib import Path

from platefinder.exceptions import PlatefinderError
from platefinder.standalone_page import read_recipe_markdown
from platefinder.lint import check, LintKind


def main() -> None:
    parser = ArgumentParser(
        description="""
            Check generated recipe markdown files for missing structure.
        """,
    )

    parser.add_argument(
        "recipe",
        type=Path,
        nargs="*",
        help="""
            The filename of the recipe markdown file to check. Pass multiple
            filenames to check multiple files.
        """,
    )

    parser.add_argument(
        "--ignore",
        "-i",
        action="extend",
        default=[],
        nargs="+",
        choices=[k.name for k in LintKind],
        help="""
            Ignore warnings of a certain types.
        """,
    )

    args = parser.parse_args()

    failed = False
    for page in args.recipe:
        try:
            markdown = read_recipe_markdown(page)
        except PlatefinderError as e:
            failed = True
            print(f"{page}: Error: {e}")
            continue

        for lint in sorted(check(markdown), key=lambda lint: lint.line):
            if lint.kind.name not in args.ignore:
                failed = True
                print(
                    f"{page}:{lint.line}: Warning: {lint.description} [{lint.kind.name}]"
                )

    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
