"""Transform failure."""


class TransformError(ValueError):
    """Raised when input is malformed for the selected transform.

    Transforms never return partial output: the whole call fails.
    """
