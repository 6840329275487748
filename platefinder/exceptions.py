class PlatefinderError(Exception):
    """Base class for exceptions thrown by platefinder."""


class RecipeFileError(PlatefinderError):
    """Thrown when a recipe markdown file cannot be read."""


class OutputFileError(PlatefinderError):
    """Thrown when a generated output file cannot be written."""
