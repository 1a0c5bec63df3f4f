"""Engine exceptions."""


class CapacityInputError(ValueError):
    """Raised when an engine function receives malformed arguments.

    Business-rule violations are never raised; they are returned as data.
    """
