"""Exceptions raised by geoconv.

Both derive from ``ValueError`` so that callers validating user input with
``except ValueError`` keep working.
"""


class ConstructionError(ValueError):
    """Raised when a conversion cannot be built from the given inputs.

    Triggers include a parameter list that does not match the method schema,
    a UTM zone outside 1..60, a zero vertical unit factor at inversion time
    and assigning CRS endpoints twice.
    """


class FormattingError(ValueError):
    """Raised when a conversion cannot be expressed in the requested format."""
