"""
exprtree expression language.

Tokenizer, decoder, evaluator, printer, and serializer for integer
expression trees.

Usage:
    from exprtree.core.expression_lang import decode, evaluate, render

    expr = decode("BOp + C 2 C 2 ")
    evaluate(expr)  # 4
    render(expr)    # "((2)+(2))"
"""

from exprtree.core.expression_lang.evaluator import EvalOptions, OverflowMode, evaluate
from exprtree.core.expression_lang.parser import decode, decode_with_remainder, load
from exprtree.core.expression_lang.printer import render
from exprtree.core.expression_lang.serializer import encode

__all__ = [
    "EvalOptions",
    "OverflowMode",
    "decode",
    "decode_with_remainder",
    "encode",
    "evaluate",
    "load",
    "render",
]
