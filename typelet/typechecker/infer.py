"""
Bidirectional type inference over explicitly annotated expressions.

``infer`` synthesizes a type bottom-up (``ctx |- e => t``); ``check``
verifies an expression against an expected type (``ctx |- e <= t``) by
inferring and comparing structurally.
"""

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
from typelet.typechecker.context import Context, extend, lookup
from typelet.typechecker.errors import NotAFunction, TypeMismatch, UnboundVariable
from typelet.typechecker.typelet_types import (
    BOOLEAN,
    NUMBER,
    FunctionType,
    Type,
    same_type,
)


def infer(ctx: Context, expr: Expression) -> Type:
    """Infer the type of ``expr`` under ``ctx``."""
    match expr:
        # ctx |- n => Number
        case Num():
            return NUMBER

        # ctx |- true => Boolean, ctx |- false => Boolean
        case Bool():
            return BOOLEAN

        # ctx[x] = t  ==>  ctx |- x => t
        case Var(name=name):
            try:
                return lookup(ctx, name)
            except UnboundVariable:
                raise UnboundVariable(name, expr) from None

        # ctx |- e1 => t1,  ctx, x:t1 |- e2 => t2  ==>  ctx |- let x = e1 in e2 => t2
        case Let(name=name, value=value, body=body):
            value_type = infer(ctx, value)
            return infer(extend(ctx, name, value_type), body)

        # ctx |- l <= Number,  ctx |- r <= Number  ==>  ctx |- l + r => Number
        case Plus(left=left, right=right):
            check(ctx, left, NUMBER)
            check(ctx, right, NUMBER)
            return NUMBER

        # ctx |- l <= Boolean,  ctx |- r <= Boolean  ==>  ctx |- l || r => Boolean
        case Or(left=left, right=right):
            check(ctx, left, BOOLEAN)
            check(ctx, right, BOOLEAN)
            return BOOLEAN

        # ctx |- l => t,  ctx |- r <= t  ==>  ctx |- l == r => Boolean
        case Eq(left=left, right=right):
            left_type = infer(ctx, left)
            check(ctx, right, left_type)
            return BOOLEAN

        # ctx |- c <= Boolean,  ctx |- a => t,  ctx |- b <= t
        #   ==>  ctx |- if c then a else b => t
        case If(condition=condition, then_expr=then_expr, else_expr=else_expr):
            check(ctx, condition, BOOLEAN)
            then_type = infer(ctx, then_expr)
            check(ctx, else_expr, then_type)
            return then_type

        # ctx, x:tx |- body => tb  ==>  ctx |- fun (x : tx) -> body => tx -> tb
        case Fun(param=param, param_type=param_type, body=body):
            body_type = infer(extend(ctx, param, param_type), body)
            return FunctionType(param_type, body_type)

        # ctx |- f => ta -> tr,  ctx |- a <= ta  ==>  ctx |- f(a) => tr
        case Call(function=function, argument=argument):
            function_type = infer(ctx, function)
            if not isinstance(function_type, FunctionType):
                raise NotAFunction(function_type, function)
            check(ctx, argument, function_type.param)
            return function_type.result

        # ctx, f:tx -> tr, x:tx |- fb <= tr,  ctx, f:tx -> tr |- body => t
        #   ==>  ctx |- letfun f(x : tx): tr -> fb in body => t
        case LetFun(
            name=name,
            param=param,
            param_type=param_type,
            return_type=return_type,
            function_body=function_body,
            body=body,
        ):
            self_type = FunctionType(param_type, return_type)
            function_ctx = extend(extend(ctx, name, self_type), param, param_type)
            check(function_ctx, function_body, return_type)
            return infer(extend(ctx, name, self_type), body)

        case _:
            raise TypeError(f"Unknown expression node: {type(expr).__name__}")


def check(ctx: Context, expr: Expression, expected: Type) -> None:
    """Assert that ``expr`` has type ``expected`` under ``ctx``."""
    actual = infer(ctx, expr)
    if not same_type(expected, actual):
        raise TypeMismatch(expected, actual, expr)
