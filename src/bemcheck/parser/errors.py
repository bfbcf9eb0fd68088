"""Parser error types."""


class ParseError(Exception):
    """Raised when style-sheet source cannot be parsed.

    The message names the problem the way postcss does: ``Unclosed block``,
    ``Unclosed bracket``, ``Unclosed comment``, ``Unclosed string``,
    ``Unexpected }`` or ``Unknown word`` for a statement that is neither a
    declaration nor an at-rule.

    Attributes:
        line: 1-based line of the offending input, or None for end of input.
        column: 1-based column on that line, when the lexer reports one.
    """

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        super().__init__(message)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        text = super().__str__()
        if self.line is None or f"line {self.line}" in text:
            return text
        return f"{text} at line {self.line}"
