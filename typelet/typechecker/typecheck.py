"""
Host-facing wrappers around the inference engine.
"""

from typing import Optional

from rich.console import Console

from typelet.ast.nodes import Expression
from typelet.typechecker.context import EMPTY_CONTEXT, Context
from typelet.typechecker.errors import TypeCheckError
from typelet.typechecker.infer import infer


def get_type_str(expr: Expression, ctx: Context = EMPTY_CONTEXT) -> str:
    """Get type information for an expression."""
    try:
        return f"Inferred type: {infer(ctx, expr)}"
    except TypeCheckError as e:
        return f"Type checking failed: {e.message}"


def type_check(
    expr: Expression,
    ctx: Context = EMPTY_CONTEXT,
    console: Optional[Console] = None,
) -> bool:
    """Type check an expression, reporting the failure on the console."""
    try:
        infer(ctx, expr)
        return True
    except TypeCheckError as e:
        (console or Console(stderr=True)).print(
            f"Type checking failed: {e.message}",
            style="bold red",
            markup=False,
        )
        return False
