"""Generation of a complete contract function with locals and a random body."""

from __future__ import annotations

from .control import statements_random
from .model import FunctionInfo, GenerationContext, Variable
from .variables import gen_variable

_VISIBILITIES = ("public", "external", "private", "internal")
_RETURN_TYPES = ("uint256", "int256")
_SELECTOR_RANGE = 5000


def gen_function(
    ctx: GenerationContext, name: str, keyword: int, other_contract: int
) -> str:
    """Return the source of a function and record it in the context.

    ``keyword`` selects the visibility (0 public, 1 external, 2 private,
    3 internal).  When ``other_contract`` is 1 a rare selector may make
    ``func_c`` return a new ``D`` and ``func_b`` reference its selector.
    """
    if not 0 <= keyword < len(_VISIBILITIES):
        raise ValueError(f"unknown visibility keyword: {keyword}")
    rng = ctx.rng
    selector = rng.randrange(_SELECTOR_RANGE) if other_contract == 1 else other_contract
    ctx.current_function = name

    parts = [f"function {name}() {_VISIBILITIES[keyword]} "]
    has_return = rng.randrange(2) == 1
    returns_contract = selector == 1 and name == "func_c"
    return_param = ""
    if returns_contract:
        parts.append("returns (D) ")
    elif has_return:
        type_index = rng.randrange(len(_RETURN_TYPES))
        return_param = _RETURN_TYPES[type_index]
        ctx.local_vars.append(Variable(return_param, "b_a", type_index))
        ctx.function_returns.append(FunctionInfo(name, keyword, "b_a"))
        parts.append(f"returns({return_param} b_a)")

    parts.append("\n{\n")
    parts.append("unchecked{\n")
    parts.append("uint256 l_z = 1;\n")
    if selector == 1 and name == "func_b":
        parts.append("func_c().func_a.selector;\n")

    local_count = rng.randrange(2) + 1
    ctx.local_vars.clear()
    for index in range(local_count):
        parts.append(gen_variable(ctx, ctx.local_vars, index, True))

    parts.append(statements_random(ctx))
    parts.append(ctx.emit_statement)
    if has_return:
        parts.append("\nreturn b_a;")
    if returns_contract:
        parts.append("return new D();\n")
    parts.append("\n}\n")
    parts.append("\n}\n")

    ctx.block_depth = 0
    ctx.functions.append(FunctionInfo(name, keyword, return_param))
    return "".join(parts)