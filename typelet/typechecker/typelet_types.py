"""
Type representations for the explicitly annotated type system
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Type(ABC):
    """Base class for all types"""

    @abstractmethod
    def __str__(self) -> str:
        pass


@dataclass(frozen=True)
class NumberType(Type):
    """The type of numeric literals and sums"""

    def __str__(self) -> str:
        return "Number"


@dataclass(frozen=True)
class BooleanType(Type):
    """The type of boolean literals, disjunctions and comparisons"""

    def __str__(self) -> str:
        return "Boolean"


@dataclass(frozen=True)
class FunctionType(Type):
    """Function type (e.g., Number -> Boolean)"""

    param: Type
    result: Type

    def __str__(self) -> str:
        # Handle right associativity of function types
        if isinstance(self.param, FunctionType):
            return f"({self.param}) -> {self.result}"
        else:
            return f"{self.param} -> {self.result}"


# Built-in types
NUMBER = NumberType()
BOOLEAN = BooleanType()


def same_type(t1: Type, t2: Type) -> bool:
    """Structural equality of two types"""
    match (t1, t2):
        case (NumberType(), NumberType()):
            return True
        case (BooleanType(), BooleanType()):
            return True
        case (
            FunctionType(param=param1, result=result1),
            FunctionType(param=param2, result=result2),
        ):
            return same_type(param1, param2) and same_type(result1, result2)
        case _:
            return False
