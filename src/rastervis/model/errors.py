"""
Typed errors raised by the model layer.
"""


class RasterError(ValueError):
    """Base class for all model errors."""


class InvalidMatrixShape(RasterError):
    """A transform matrix was built from a coefficient list that is not 3x3."""


class InvalidGeometry(RasterError):
    """Negative radius or non-finite coordinates."""


class ParseFailure(RasterError):
    """A text field does not contain a number."""
