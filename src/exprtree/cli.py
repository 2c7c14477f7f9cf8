"""
exprtree CLI.

Commands take an encoded stream (e.g. "BOp + C 2 C 2 ") and print a view
of the decoded tree:

- eval:    integer value
- render:  fully parenthesized infix text
- encode:  canonical re-encoding
- show:    node tree
- demo:    walk-through on two sample trees
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from exprtree import __version__
from exprtree.core.config import EngineConfig, find_config, load_config
from exprtree.core.errors import DecodeError, ExprTreeError
from exprtree.core.expression_lang import EvalOptions, OverflowMode, decode
from exprtree.core.ir import BinaryOp, Conditional, Const, Expr, Operator

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="exprtree - evaluate, render, and re-encode integer expression trees",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

DEMO_STREAM = "BOp * BOp + C 2 C 2 C 3"


def _configure_logging(verbose: bool) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        log_level = os.getenv("EXPRTREE_LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to exprtree.toml (default: ./exprtree.toml if present)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """exprtree CLI main callback for global options."""
    _configure_logging(verbose)
    try:
        ctx.obj = load_config(config) if config else find_config()
    except ExprTreeError as e:
        _fail(e)
    if ctx.obj.path:
        logger.debug("Using config %s", ctx.obj.path)


def _fail(error: ExprTreeError) -> NoReturn:
    """Report an exprtree error and exit with code 1."""
    label = "Decode error" if isinstance(error, DecodeError) else "Error"
    err_console.print(f"[red]{label}:[/red] {escape(str(error))}", soft_wrap=True)
    raise typer.Exit(code=1)


def _decode(ctx: typer.Context, stream: str, strict: bool = False, lenient: bool = False) -> Expr:
    cfg: EngineConfig = ctx.obj
    use_strict = (strict or cfg.parser.strict) and not lenient
    try:
        return decode(stream, strict=use_strict)
    except ExprTreeError as e:
        _fail(e)


def _strict_option() -> bool:
    return typer.Option(False, "--strict", help="Reject tokens left after a complete tree")


def _lenient_option() -> bool:
    return typer.Option(
        False, "--lenient", help="Ignore tokens left after a complete tree, overriding config"
    )


@app.command(name="eval")
def eval_command(
    ctx: typer.Context,
    stream: str = typer.Argument(..., help="Encoded expression stream"),
    strict: bool = _strict_option(),
    lenient: bool = _lenient_option(),
    overflow: OverflowMode | None = typer.Option(
        None, "--overflow", help="Overflow policy (default from config: checked)"
    ),
    bits: int | None = typer.Option(
        None, "--bits", min=2, help="Signed integer width (default from config: 64)"
    ),
) -> None:
    """Evaluate an encoded expression and print its value."""
    cfg: EngineConfig = ctx.obj
    expr = _decode(ctx, stream, strict, lenient)
    options = EvalOptions(
        overflow=overflow or cfg.evaluator.overflow,
        int_bits=bits or cfg.evaluator.int_bits,
    )
    try:
        value = expr.compute(options)
    except ExprTreeError as e:
        _fail(e)
    typer.echo(value)


@app.command(name="render")
def render_command(
    ctx: typer.Context,
    stream: str = typer.Argument(..., help="Encoded expression stream"),
    strict: bool = _strict_option(),
    lenient: bool = _lenient_option(),
) -> None:
    """Print an encoded expression as fully parenthesized infix text."""
    typer.echo(_decode(ctx, stream, strict, lenient).render())


@app.command(name="encode")
def encode_command(
    ctx: typer.Context,
    stream: str = typer.Argument(..., help="Encoded expression stream"),
    strict: bool = _strict_option(),
    lenient: bool = _lenient_option(),
) -> None:
    """Decode and re-encode an expression in canonical form."""
    typer.echo(_decode(ctx, stream, strict, lenient).encode())


@app.command(name="show")
def show_command(
    ctx: typer.Context,
    stream: str = typer.Argument(..., help="Encoded expression stream"),
    strict: bool = _strict_option(),
    lenient: bool = _lenient_option(),
) -> None:
    """Print the decoded node tree."""
    expr = _decode(ctx, stream, strict, lenient)
    tree = Tree(_label(expr))
    _add_children(tree, expr)
    console.print(tree)


def _label(expr: Expr) -> str:
    if isinstance(expr, Const):
        return f"[cyan]Const[/cyan] {expr.value}"
    if isinstance(expr, BinaryOp):
        return f"[magenta]BinaryOp[/magenta] {escape(expr.operator.value)}"
    return "[yellow]Conditional[/yellow]"


def _add_children(tree: Tree, expr: Expr) -> None:
    if isinstance(expr, BinaryOp):
        children = [("left", expr.left), ("right", expr.right)]
    elif isinstance(expr, Conditional):
        children = [
            ("condition", expr.condition),
            ("on_true", expr.on_true),
            ("on_false", expr.on_false),
        ]
    else:
        return
    for role, child in children:
        branch = tree.add(f"[dim]{role}:[/dim] {_label(child)}")
        _add_children(branch, child)


@app.command(name="demo")
def demo_command(ctx: typer.Context) -> None:
    """Build 2 + 2, then decode and evaluate a sample stream."""
    cfg: EngineConfig = ctx.obj
    options = cfg.evaluator.to_options()

    e = BinaryOp(operator=Operator.ADD, left=Const(value=2), right=Const(value=2))
    typer.echo(e.compute(options))
    typer.echo(e.render())
    typer.echo(e.encode())

    e2 = _decode(ctx, DEMO_STREAM, lenient=True)
    typer.echo(e2.compute(options))
    typer.echo(e2.render())


@app.command(name="version")
def version_command() -> None:
    """Show the exprtree version."""
    typer.echo(f"exprtree {__version__}")


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
