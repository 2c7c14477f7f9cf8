"""
Error types for exprtree decoding, evaluation, and configuration.
"""

from dataclasses import dataclass


class ExprTreeError(Exception):
    """Base exception for all exprtree errors."""

    def __init__(self, message: str, context: "TokenContext | None" = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class TreeDepthError(ExprTreeError):
    """
    Raised when a tree is nested too deeply to walk.

    Walkers recurse once per tree level, so depth is bounded by the
    interpreter recursion limit. Decoding enforces its own, lower limit.
    """

    pass


class DecodeError(ExprTreeError):
    """
    Raised when a token stream cannot be decoded into an expression tree.

    Decoding is all-or-nothing: no partial tree is ever returned.
    """

    @property
    def pos(self) -> int | None:
        """Index of the offending token, or None when unknown."""
        return self.context.index if self.context else None

    @property
    def offset(self) -> int | None:
        """Character offset of the offending token, or None when unknown."""
        return self.context.offset if self.context else None


class UnexpectedEndOfInputError(DecodeError):
    """The stream ended before the tree was complete."""

    pass


class InvalidIntegerError(DecodeError):
    """A constant's token is not a signed decimal integer."""

    pass


class InvalidOperatorError(DecodeError):
    """A binary operator token is not one of + - * /."""

    pass


class UnknownTagError(DecodeError):
    """A node tag is not C, BOp or TOp."""

    pass


class TrailingInputError(DecodeError):
    """Tokens remain after a complete tree (strict decoding only)."""

    pass


class NestingTooDeepError(DecodeError, TreeDepthError):
    """The stream nests nodes deeper than the decoder allows."""

    pass


class EvaluationError(ExprTreeError):
    """
    Raised when an expression tree cannot be reduced to an integer.

    Examples:
    - Division by zero
    - Result outside the integer domain under checked overflow
    """

    pass


class DivisionByZeroError(EvaluationError):
    """A divisor evaluated to zero."""

    pass


class ArithmeticOverflowError(EvaluationError):
    """A value left the integer domain under checked overflow."""

    pass


class EvaluationDepthError(EvaluationError, TreeDepthError):
    """The tree is nested too deeply to evaluate."""

    pass


class ConfigError(ExprTreeError):
    """Raised when exprtree.toml is malformed or holds invalid values."""

    pass


@dataclass
class TokenContext:
    """
    Location of an error inside an encoded token stream.

    Attributes:
        source: The full encoded stream
        index: Token index (0-indexed) within the stream
        offset: Character offset (0-indexed) of the token, or of the end
            of input when the stream ran out
    """

    source: str
    index: int
    offset: int

    def format(self) -> str:
        """
        Format the context as the stream with a marker under the token.

        Returns:
            Two lines like:
                token 3 at offset 6: BOp + C x
                                             ^^^
        """
        prefix = f"token {self.index} at offset {self.offset}: "
        marker = " " * (len(prefix) + self.offset) + "^^^"
        return f"{prefix}{self.source}\n{marker}"
