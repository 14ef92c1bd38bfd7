from typing import TYPE_CHECKING, Optional

from typelet.typechecker.typelet_types import Type

if TYPE_CHECKING:
    from typelet.ast.nodes import Expression


class TypeCheckError(Exception):
    """Exception raised during type checking."""

    def __init__(self, message: str, node: Optional["Expression"] = None) -> None:
        self.message = message
        self.node = node
        super().__init__(message)


class UnboundVariable(TypeCheckError):
    """A variable was read that no enclosing binder introduced."""

    def __init__(self, name: str, node: Optional["Expression"] = None) -> None:
        self.name = name
        super().__init__(f"Unbound variable: {name}", node)


class TypeMismatch(TypeCheckError):
    """An expression's inferred type differs from the type it was checked against."""

    def __init__(
        self,
        expected: Type,
        actual: Type,
        node: Optional["Expression"] = None,
    ) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Type mismatch: expected {expected}, but got {actual}",
            node,
        )


class NotAFunction(TypeCheckError):
    """The callee of an application does not have a function type."""

    def __init__(self, actual: Type, node: Optional["Expression"] = None) -> None:
        self.actual = actual
        super().__init__(
            f"Type mismatch: expected a function, but got {actual}",
            node,
        )
