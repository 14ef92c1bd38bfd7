"""
Typing contexts: immutable mappings from variable names to types.
"""

from typing import Dict, ItemsView, Iterator, Mapping, Optional

from typelet.typechecker.errors import UnboundVariable
from typelet.typechecker.typelet_types import Type

TypeBindings = Dict[str, Type]


class Context:
    """Typing context mapping variable names to types.

    A context is never mutated after construction. ``extend`` copies the
    bindings and inserts into the copy, so a context handed to one subtree
    stays valid and unchanged for its siblings.
    """

    __slots__ = ("_bindings",)

    def __init__(self, bindings: Optional[Mapping[str, Type]] = None) -> None:
        """Initialize the context with optional bindings."""
        self._bindings: TypeBindings = dict(bindings or {})

    def lookup(self, name: str) -> Type:
        """Return the type bound to ``name``."""
        if name not in self._bindings:
            raise UnboundVariable(name)
        return self._bindings[name]

    def extend(self, name: str, ty: Type) -> "Context":
        """Return a new context with an additional binding."""
        new_bindings = self._bindings.copy()
        new_bindings[name] = ty
        return Context(new_bindings)

    def items(self) -> ItemsView[str, Type]:
        return self._bindings.items()

    def __contains__(self, name: object) -> bool:
        return name in self._bindings

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Context):
            return NotImplemented
        return self._bindings == other._bindings

    def __repr__(self) -> str:
        items = ", ".join(f"{name}: {ty}" for name, ty in self._bindings.items())
        return f"Context({{{items}}})"


EMPTY_CONTEXT = Context()


def lookup(ctx: Context, name: str) -> Type:
    """Look up the type of a variable, raising UnboundVariable if absent."""
    return ctx.lookup(name)


def extend(ctx: Context, name: str, ty: Type) -> Context:
    """Immutably extend ``ctx`` with the binding ``name: ty``."""
    return ctx.extend(name, ty)
