"""
Errors raised by the forward parser.

Missing data is never an error: absent fields come back as None or []. Only
a defective pattern catalog is fatal.
"""


class ConfigurationError(ValueError):
    """The pattern catalog is malformed or a pattern does not compile."""

    def __init__(self, message: str, field: str | None = None, index: int | None = None):
        self.field = field
        self.index = index
        location = ""
        if field is not None:
            location = f"{field}[{index}]: " if index is not None else f"{field}: "
        super().__init__(f"{location}{message}")
