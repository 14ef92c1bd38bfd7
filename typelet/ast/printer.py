from typing import List, Optional, Tuple

from rich.console import Console
from rich.text import Text

from typelet.ast.nodes import (
    Bool,
    Call,
    Eq,
    Expression,
    Fun,
    If,
    Let,
    LetFun,
    Num,
    Or,
    Plus,
    Var,
)
from typelet.typechecker.context import EMPTY_CONTEXT, Context, extend
from typelet.typechecker.errors import TypeCheckError
from typelet.typechecker.infer import infer
from typelet.typechecker.typelet_types import FunctionType

ATOMS = (Num, Bool, Var, Call)

node_colors = {
    "literal": "cyan",
    "variable": "green",
    "operation": "yellow",
    "control": "magenta",
    "function": "bright_blue",
}


def format_expr(expr: Expression) -> str:
    """Render an expression in surface notation."""
    match expr:
        case Num(value=value):
            return str(value)
        case Bool(value=value):
            return "true" if value else "false"
        case Var(name=name):
            return name
        case Let(name=name, value=value, body=body):
            return f"let {name} = {format_expr(value)} in {format_expr(body)}"
        case Plus(left=left, right=right):
            return f"{_format_operand(left)} + {_format_operand(right)}"
        case Or(left=left, right=right):
            return f"{_format_operand(left)} || {_format_operand(right)}"
        case Eq(left=left, right=right):
            return f"{_format_operand(left)} == {_format_operand(right)}"
        case If(condition=condition, then_expr=then_expr, else_expr=else_expr):
            return (
                f"if {format_expr(condition)} "
                f"then {format_expr(then_expr)} "
                f"else {format_expr(else_expr)}"
            )
        case Fun(param=param, param_type=param_type, body=body):
            return f"fun ({param} : {param_type}) -> {format_expr(body)}"
        case Call(function=function, argument=argument):
            return f"{_format_operand(function)}({format_expr(argument)})"
        case LetFun(
            name=name,
            param=param,
            param_type=param_type,
            return_type=return_type,
            function_body=function_body,
            body=body,
        ):
            return (
                f"letfun {name}({param} : {param_type}): {return_type} -> "
                f"{format_expr(function_body)} in {format_expr(body)}"
            )
        case _:
            raise TypeError(f"Unknown expression node: {type(expr).__name__}")


def _format_operand(expr: Expression) -> str:
    if isinstance(expr, ATOMS):
        return format_expr(expr)
    return f"({format_expr(expr)})"


def format_type(ctx: Context, expr: Expression, show_types: bool = True) -> str:
    """Format the inferred type of a node for display."""
    if not show_types:
        return ""
    try:
        return f" :: {infer(ctx, expr)}"
    except TypeCheckError:
        return " :: <error>"


def _node_label(expr: Expression) -> str:
    match expr:
        case Num(value=value):
            return f"({value})"
        case Bool(value=value):
            return "(true)" if value else "(false)"
        case Var(name=name) | Let(name=name):
            return f"({name})"
        case Fun(param=param, param_type=param_type):
            return f"({param} : {param_type})"
        case LetFun(
            name=name, param=param, param_type=param_type, return_type=return_type
        ):
            return f"({name}({param} : {param_type}): {return_type})"
        case _:
            return ""


def _node_style(expr: Expression) -> str:
    match expr:
        case Num() | Bool():
            return node_colors["literal"]
        case Var():
            return node_colors["variable"]
        case Plus() | Or() | Eq():
            return node_colors["operation"]
        case Let() | If():
            return node_colors["control"]
        case Fun() | Call() | LetFun():
            return node_colors["function"]
        case _:
            return "white"


def _children(
    ctx: Context, expr: Expression
) -> List[Tuple[str, Expression, Context]]:
    """Labelled children of a node, each with the context it is typed under."""
    match expr:
        case Let(name=name, value=value, body=body):
            try:
                body_ctx = extend(ctx, name, infer(ctx, value))
            except TypeCheckError:
                body_ctx = ctx
            return [("value", value, ctx), ("body", body, body_ctx)]
        case Plus(left=left, right=right) | Or(left=left, right=right) | Eq(
            left=left, right=right
        ):
            return [("left", left, ctx), ("right", right, ctx)]
        case If(condition=condition, then_expr=then_expr, else_expr=else_expr):
            return [
                ("condition", condition, ctx),
                ("then", then_expr, ctx),
                ("else", else_expr, ctx),
            ]
        case Fun(param=param, param_type=param_type, body=body):
            return [("body", body, extend(ctx, param, param_type))]
        case Call(function=function, argument=argument):
            return [("function", function, ctx), ("argument", argument, ctx)]
        case LetFun(
            name=name,
            param=param,
            param_type=param_type,
            return_type=return_type,
            function_body=function_body,
            body=body,
        ):
            self_ctx = extend(ctx, name, FunctionType(param_type, return_type))
            return [
                ("function_body", function_body, extend(self_ctx, param, param_type)),
                ("body", body, self_ctx),
            ]
        case _:
            return []


def print_annotated_expr(
    expr: Expression,
    ctx: Context = EMPTY_CONTEXT,
    show_types: bool = True,
    max_depth: Optional[int] = None,
    console: Optional[Console] = None,
) -> None:
    """
    Print an expression tree, one node per line, annotated with inferred types.

    Args:
        expr: The expression to print
        ctx: Context the root expression is typed under
        show_types: Whether to show type annotations
        max_depth: Maximum depth to print (None for unlimited)
        console: Console to print to (a new one by default)
    """
    _print_node(expr, console or Console(), ctx, 0, show_types, max_depth, 0)


def _print_node(
    expr: Expression,
    console: Console,
    ctx: Context,
    indent: int,
    show_types: bool,
    max_depth: Optional[int],
    current_depth: int,
) -> None:
    if max_depth is not None and current_depth >= max_depth:
        console.print("  " * indent + "...", style="dim")
        return

    prefix = "  " * indent

    text = Text()
    text.append(prefix, style="dim")
    text.append(type(expr).__name__, style=_node_style(expr))
    text.append(_node_label(expr), style="bright_white")
    type_str = format_type(ctx, expr, show_types)
    if type_str:
        text.append(type_str, style="dim red")
    console.print(text)

    for label, child, child_ctx in _children(ctx, expr):
        console.print(f"{prefix}  {label}:", style="dim", markup=False)
        _print_node(
            child,
            console,
            child_ctx,
            indent + 2,
            show_types,
            max_depth,
            current_depth + 1,
        )
