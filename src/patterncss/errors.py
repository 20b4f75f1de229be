"""Error types raised by patterncss."""


class PatternCSSError(Exception):
    """Base class for patterncss errors."""


class BlockTreeError(PatternCSSError):
    """Raised when a serialized block tree cannot be loaded."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class RegistryFrozenError(PatternCSSError):
    """Raised when a generator is registered after the registry was first used."""
