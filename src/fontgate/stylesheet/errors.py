"""Errors raised while reading CSS into a stylesheet tree."""


class ParseError(Exception):
    """Raised when CSS text is malformed or cannot be decoded.

    ``line`` and ``column`` point at the offending token when known.
    """

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.line is None:
            return message
        return f"CSS line {self.line}, column {self.column}: {message}"
