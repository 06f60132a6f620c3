"""
Errors raised by the estimators.

Degenerate data never raises (see the sentinel results), only parameters
that make a run meaningless do.
"""


class InvalidParameterError(ValueError):
    """
    A parameter is outside its valid range, e.g. k <= 0 or k > number of points.

    Subclasses ValueError so callers that already catch ValueError keep working.
    """

    def __init__(self, name: str, value, reason: str):
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"{name}={value!r}: {reason}")
