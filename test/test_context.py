import pytest

from typelet.typechecker.context import EMPTY_CONTEXT, Context, extend, lookup
from typelet.typechecker.errors import UnboundVariable
from typelet.typechecker.typelet_types import BOOLEAN, NUMBER, FunctionType


def test_lookup_bound() -> None:
    ctx = Context({"x": NUMBER})
    assert lookup(ctx, "x") == NUMBER


def test_lookup_unbound() -> None:
    with pytest.raises(UnboundVariable) as exc_info:
        lookup(EMPTY_CONTEXT, "x")
    assert exc_info.value.name == "x"
    assert str(exc_info.value) == "Unbound variable: x"


def test_extend_does_not_mutate() -> None:
    extended = extend(EMPTY_CONTEXT, "x", NUMBER)
    assert lookup(extended, "x") == NUMBER
    assert "x" not in EMPTY_CONTEXT
    assert len(EMPTY_CONTEXT) == 0
    with pytest.raises(UnboundVariable):
        lookup(EMPTY_CONTEXT, "x")


def test_extend_overwrites_only_the_copy() -> None:
    outer = extend(EMPTY_CONTEXT, "x", NUMBER)
    inner = extend(outer, "x", BOOLEAN)
    assert lookup(inner, "x") == BOOLEAN
    assert lookup(outer, "x") == NUMBER


def test_sibling_extensions_are_independent() -> None:
    base = extend(EMPTY_CONTEXT, "f", FunctionType(NUMBER, NUMBER))
    left = extend(base, "x", NUMBER)
    right = extend(base, "y", BOOLEAN)
    assert "y" not in left
    assert "x" not in right
    assert len(base) == 1


def test_initial_bindings_are_copied() -> None:
    bindings = {"x": NUMBER}
    ctx = Context(bindings)
    bindings["y"] = BOOLEAN
    assert "y" not in ctx
    assert dict(ctx.items()) == {"x": NUMBER}


def test_context_equality() -> None:
    assert extend(EMPTY_CONTEXT, "x", NUMBER) == Context({"x": NUMBER})
    assert extend(EMPTY_CONTEXT, "x", NUMBER) != Context({"x": BOOLEAN})
    assert list(Context({"a": NUMBER, "b": BOOLEAN})) == ["a", "b"]
