from abc import ABC
from dataclasses import dataclass
from typing import Union

from typelet.typechecker.typelet_types import Type


@dataclass(frozen=True)
class ASTNode(ABC):
    pass


# Literals
@dataclass(frozen=True)
class Num(ASTNode):
    value: Union[int, float]


@dataclass(frozen=True)
class Bool(ASTNode):
    value: bool


# Variables
@dataclass(frozen=True)
class Var(ASTNode):
    name: str


# let name = value in body
@dataclass(frozen=True)
class Let(ASTNode):
    name: str
    value: "Expression"
    body: "Expression"


# Binary Operations
@dataclass(frozen=True)
class Plus(ASTNode):
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class Or(ASTNode):
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class Eq(ASTNode):
    left: "Expression"
    right: "Expression"


# Control Flow
@dataclass(frozen=True)
class If(ASTNode):
    condition: "Expression"
    then_expr: "Expression"
    else_expr: "Expression"


# Functions
@dataclass(frozen=True)
class Fun(ASTNode):
    param: str
    param_type: Type
    body: "Expression"


@dataclass(frozen=True)
class Call(ASTNode):
    function: "Expression"
    argument: "Expression"


# letfun name(param : param_type): return_type -> function_body in body
@dataclass(frozen=True)
class LetFun(ASTNode):
    name: str
    param: str
    param_type: Type
    return_type: Type
    function_body: "Expression"
    body: "Expression"


Expression = Union[
    Num,
    Bool,
    Var,
    Let,
    Plus,
    Or,
    Eq,
    If,
    Fun,
    Call,
    LetFun,
]
