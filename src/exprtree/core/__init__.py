"""Core exprtree functionality: IR, decoder, evaluator, printer, serializer, configuration."""

from . import ir
from .config import EngineConfig, find_config, load_config
from .errors import (
    ArithmeticOverflowError,
    ConfigError,
    DecodeError,
    DivisionByZeroError,
    EvaluationDepthError,
    EvaluationError,
    ExprTreeError,
    InvalidIntegerError,
    InvalidOperatorError,
    NestingTooDeepError,
    TokenContext,
    TrailingInputError,
    TreeDepthError,
    UnexpectedEndOfInputError,
    UnknownTagError,
)
from .expression_lang import (
    EvalOptions,
    OverflowMode,
    decode,
    decode_with_remainder,
    encode,
    evaluate,
    load,
    render,
)

__all__ = [
    "ir",
    # Errors
    "ExprTreeError",
    "DecodeError",
    "UnexpectedEndOfInputError",
    "InvalidIntegerError",
    "InvalidOperatorError",
    "UnknownTagError",
    "TrailingInputError",
    "NestingTooDeepError",
    "EvaluationError",
    "DivisionByZeroError",
    "ArithmeticOverflowError",
    "EvaluationDepthError",
    "TreeDepthError",
    "ConfigError",
    "TokenContext",
    # Expression language
    "EvalOptions",
    "OverflowMode",
    "decode",
    "decode_with_remainder",
    "encode",
    "evaluate",
    "load",
    "render",
    # Configuration
    "EngineConfig",
    "find_config",
    "load_config",
]
