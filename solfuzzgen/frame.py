"""Generation of whole Solidity source files."""

from __future__ import annotations

from .function import gen_function
from .model import GenerationContext
from .variables import gen_array, gen_const_variable, gen_variable, get_name

_ID_MARKER = "-".join(("SPDX", "License", "Identifier"))
_ID_VALUE = "-".join(("GPL", "3.0"))
_HEADER = f"//{_ID_MARKER}: {_ID_VALUE}\npragma solidity ^0.8.0;\n"
_OTHER_CONTRACT_ODDS = 50
_FUNCTION_COUNT = 3


def gen_other_contract(ctx: GenerationContext) -> str:
    """Return a helper contract ``D`` with arrays and one external function."""
    parts = ["contract D{\n"]
    for index in range(ctx.rng.randrange(2) + 1):
        parts.append(gen_array(ctx, ctx.arrays, index))
    parts.append(gen_function(ctx, "func_a", 1, 0))
    parts.append("}\n")
    ctx.arrays.clear()
    return "".join(parts)


def get_frame(ctx: GenerationContext) -> str:
    """Return a complete source file holding the contract ``ContractName``."""
    rng = ctx.rng
    parts = [_HEADER]
    other_contract = 0
    if rng.randrange(_OTHER_CONTRACT_ODDS) == 1:
        parts.append(gen_other_contract(ctx))
        other_contract = 1
    parts.append("contract ContractName{\n\t")

    for index in range(rng.randrange(3) + 1):
        parts.append(gen_variable(ctx, ctx.state_vars, index, False))
    for index in range(rng.randrange(2) + 1):
        parts.append(gen_const_variable(ctx, ctx.const_vars, index))
    for index in range(rng.randrange(2) + 1):
        parts.append(gen_array(ctx, ctx.arrays, index))
    ctx.arrays_backup = list(ctx.arrays)

    params = ",".join(f"{v.type_name} {v.name}" for v in ctx.state_vars)
    args = ",".join(v.name for v in ctx.state_vars)
    ctx.event_declaration = f"event testtest({params});\n"
    ctx.emit_statement = f"emit testtest({args});\n"
    parts.append(ctx.event_declaration)
    ctx.event_declaration = ""

    for index in range(_FUNCTION_COUNT):
        ctx.arrays = list(ctx.arrays_backup)
        parts.append(gen_function(ctx, "func_" + get_name(index), 0, other_contract))

    parts.append("}")
    ctx.reset_contract()
    return "".join(parts)