import random

import pytest

from solfuzzgen.control import (
    block_random,
    bool_return_bool,
    ifelse_random,
    loop_random,
    return_bool,
    return_int,
    statements_random,
)
from solfuzzgen.model import GenerationContext, Variable


def make_ctx(seed):
    ctx = GenerationContext(rng=random.Random(seed))
    ctx.state_vars = [Variable("uint256", "a", 1), Variable("int256", "b", 2)]
    ctx.local_vars = [Variable("uint256", "l_a", 3)]
    ctx.arrays = [Variable("uint256", "Arraya", length=3)]
    ctx.const_vars = [Variable("uint256", "const_a")]
    return ctx


def balanced(text, open_char, close_char):
    depth = 0
    for char in text:
        if char == open_char:
            depth += 1
        elif char == close_char:
            depth -= 1
        if depth < 0:
            return False
    return depth == 0


@pytest.mark.parametrize("seed", range(15))
def test_return_int(seed):
    ctx = make_ctx(seed)
    result = return_int(ctx, "x", "y")
    assert result in {f"(x{op}y)" for op in ("+", "-", "*", "/", "|", "&", "^")}


@pytest.mark.parametrize("seed", range(15))
def test_return_bool(seed):
    ctx = make_ctx(seed)
    result = return_bool(ctx, "x", "y")
    assert result in {f"(x{op}y)" for op in ("<", ">", "==", "!=")}


@pytest.mark.parametrize("seed", range(15))
def test_bool_return_bool(seed):
    ctx = make_ctx(seed)
    result = bool_return_bool(ctx, "p", "q")
    assert result in {f"(p{op}q)" for op in ("||", "&&", "==", "!=")}


def test_operators_all_reachable():
    ctx = make_ctx(3)
    seen = {return_int(ctx, "x", "y") for _ in range(300)}
    assert len(seen) == 7


@pytest.mark.parametrize("seed", range(30))
def test_ifelse_structure(seed):
    ctx = make_ctx(seed)
    text = ifelse_random(ctx)
    assert text.startswith("\nif(")
    assert text.endswith("}\n")
    assert balanced(text, "{", "}")
    assert balanced(text, "(", ")")
    assert ctx.loop_depth == 0


def test_ifelse_needs_variables():
    ctx = GenerationContext(rng=random.Random(0))
    with pytest.raises(ValueError):
        ifelse_random(ctx)


def test_loop_depth_limit():
    ctx = make_ctx(0)
    ctx.loop_depth = 3
    assert loop_random(ctx) == ""
    assert ctx.loop_depth == 3


@pytest.mark.parametrize("seed", range(30))
def test_loop_structure(seed):
    ctx = make_ctx(seed)
    text = loop_random(ctx)
    assert "for_i" in text
    assert "for(" in text
    assert balanced(text, "{", "}")
    assert balanced(text, "(", ")")
    assert ctx.loop_depth == 0


@pytest.mark.parametrize("seed", range(20))
def test_deep_block_only_assigns(seed):
    ctx = make_ctx(seed)
    ctx.block_depth = 2
    text = block_random(ctx)
    assert text.startswith("\n")
    assert "if(" not in text
    assert "for(" not in text
    assert "assembly{" not in text
    assert text.endswith(";\n")
    assert ctx.block_depth == 3


@pytest.mark.parametrize("seed", range(30))
def test_block_balanced(seed):
    ctx = make_ctx(seed)
    text = block_random(ctx)
    assert balanced(text, "{", "}")
    assert balanced(text, "(", ")")
    assert ctx.loop_depth == 0


@pytest.mark.parametrize("seed", range(30))
def test_statements_balanced(seed):
    ctx = make_ctx(seed)
    text = statements_random(ctx)
    assert text
    assert balanced(text, "{", "}")
    assert balanced(text, "(", ")")
    assert ctx.loop_depth == 0


def test_statements_reach_all_kinds():
    ctx = make_ctx(11)
    text = "".join(statements_random(ctx) for _ in range(40))
    assert "\nif(" in text
    assert "for(" in text
    assert "assembly{" in text