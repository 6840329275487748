from setuptools import setup, find_packages

setup(
    name="platefinder",
    version="1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"platefinder": ["templates/*.html"]},
    description=(
        "Extracts recipe summaries and shopping lists from generated recipe "
        "markdown."
    ),
    python_requires=">=3.8",
    install_requires=["peggie>=0.2.0", "jinja2"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "platefinder=platefinder.scripts.platefinder:main",
            "platefinder-lint=platefinder.scripts.platefinder_lint:main",
        ],
    },
)
