# errors.py
"""
Exceptions raised by the LFSR graph generator.

All of them are ValueErrors, so callers that already guard generator
parameters with `except ValueError` keep working.
"""


class LfsrGraphError(ValueError):
    """Base class for every error raised by this package."""


class InvalidProbabilityLevel(LfsrGraphError):
    pass


class InvalidVertexCount(LfsrGraphError):
    pass


class InvalidSeed(LfsrGraphError):
    pass


class AdjacencyFormatError(LfsrGraphError):
    """A line of an adjacency list file could not be parsed."""

    def __init__(self, message: str, lineno=None):
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)
        self.lineno = lineno
