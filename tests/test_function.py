import itertools
import random

import pytest

from solfuzzgen.function import gen_function
from solfuzzgen.model import GenerationContext, Variable


def _ctx(seed):
    ctx = GenerationContext(rng=random.Random(seed))
    ctx.state_vars.append(Variable("uint256", "a", 1))
    ctx.arrays.append(Variable("uint256", "Arraya", length=3))
    ctx.const_vars.append(Variable("uint256", "const_a"))
    return ctx


def _seed_where(predicate):
    return next(s for s in itertools.count() if predicate(random.Random(s)))


@pytest.mark.parametrize(
    "keyword, word",
    [(0, "public"), (1, "external"), (2, "private"), (3, "internal")],
)
def test_visibility_keyword(keyword, word):
    ctx = _ctx(3)
    text = gen_function(ctx, "func_a", keyword, 0)
    assert text.startswith(f"function func_a() {word} ")
    assert ctx.functions[-1].name == "func_a"
    assert ctx.functions[-1].visibility == keyword


@pytest.mark.parametrize("keyword", [-1, 4])
def test_unknown_keyword_raises(keyword):
    with pytest.raises(ValueError):
        gen_function(_ctx(1), "func_a", keyword, 0)


@pytest.mark.parametrize("seed", range(20))
def test_body_structure(seed):
    ctx = _ctx(seed)
    ctx.emit_statement = "emit testtest(a);\n"
    ctx.block_depth = 5
    text = gen_function(ctx, "func_b", 0, 0)
    assert "\n{\nunchecked{\nuint256 l_z = 1;\n" in text
    assert text.endswith("\n}\n\n}\n")
    assert "emit testtest(a);\n" in text
    assert ctx.block_depth == 0
    assert ctx.current_function == "func_b"
    assert "func_c().func_a.selector;" not in text


@pytest.mark.parametrize("seed", range(20))
def test_locals_declared_and_return_consistent(seed):
    ctx = _ctx(seed)
    text = gen_function(ctx, "func_a", 0, 0)
    names = [v.name for v in ctx.local_vars]
    assert names in (["l_a"], ["l_a", "l_b"])
    for var in ctx.local_vars:
        assert f"\n\t{var.type_name} {var.name} = " in text
    assert ("returns(" in text) == ("\nreturn b_a;" in text)
    if "returns(" in text:
        info = ctx.functions[-1]
        assert f"returns({info.return_param} b_a)" in text
        assert ctx.function_returns[-1].name == "func_a"
        assert ctx.function_returns[-1].return_param == "b_a"
    else:
        assert ctx.functions[-1].return_param == ""
        assert ctx.function_returns == []


def test_functions_accumulate():
    ctx = _ctx(7)
    gen_function(ctx, "func_a", 0, 0)
    gen_function(ctx, "func_b", 1, 0)
    assert [f.name for f in ctx.functions] == ["func_a", "func_b"]


def test_selector_makes_func_c_return_contract():
    seed = _seed_where(lambda r: r.randrange(5000) == 1)
    ctx = _ctx(seed)
    text = gen_function(ctx, "func_c", 0, 1)
    assert "returns (D) " in text
    assert "return new D();\n" in text


def test_selector_makes_func_b_reference_selector():
    seed = _seed_where(lambda r: r.randrange(5000) == 1)
    ctx = _ctx(seed)
    text = gen_function(ctx, "func_b", 0, 1)
    assert "func_c().func_a.selector;\n" in text
    assert "returns (D)" not in text


def test_same_seed_same_output():
    first = gen_function(_ctx(11), "func_a", 0, 0)
    second = gen_function(_ctx(11), "func_a", 0, 0)
    assert first.startswith("function func_a() public ")
    assert first.endswith("\n}\n\n}\n")
    assert first == second