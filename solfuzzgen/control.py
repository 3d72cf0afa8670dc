"""Random control flow: blocks, if-statements, loops and function bodies."""

from __future__ import annotations

from .assembly import inline_assembly
from .assign import assign_random
from .model import GenerationContext

_INT_OPERATORS = ("+", "-", "*", "/", "|", "&", "^")
_COMPARE_OPERATORS = ("<", ">", "==", "!=")
_BOOL_OPERATORS = ("||", "&&", "==", "!=")
_LOOP_VARIABLES = ("for_i", "for_j", "for_k")
_MAX_LOOP_DEPTH = 3
_MAX_BLOCK_DEPTH = 3


def return_int(ctx: GenerationContext, left: str, right: str) -> str:
    """Combine two integer expressions with a random arithmetic or bitwise operator."""
    return f"({left}{ctx.rng.choice(_INT_OPERATORS)}{right})"


def return_bool(ctx: GenerationContext, left: str, right: str) -> str:
    """Compare two integer expressions with a random comparison."""
    return f"({left}{ctx.rng.choice(_COMPARE_OPERATORS)}{right})"


def bool_return_bool(ctx: GenerationContext, left: str, right: str) -> str:
    """Combine two boolean expressions with a random logical operator."""
    return f"({left}{ctx.rng.choice(_BOOL_OPERATORS)}{right})"


def _int_operand(ctx: GenerationContext) -> str:
    rng = ctx.rng
    pool = ctx.state_vars + ctx.local_vars + ctx.arrays
    if not pool:
        raise ValueError("no variables available for a condition")
    var = rng.choice(pool)
    if var.is_array():
        return f"int256({var.name}[{rng.randrange(var.length)}])"
    return f"int256({var.name})"


def ifelse_random(ctx: GenerationContext) -> str:
    """Return an if-statement with a compound condition and a random block."""
    rng = ctx.rng
    comparisons = []
    for _ in range(rng.randrange(3) + 1):
        left = _int_operand(ctx)
        right = _int_operand(ctx)
        comparisons.append(return_bool(ctx, left, right))
    condition = comparisons[0]
    for comparison in comparisons[1:]:
        condition = bool_return_bool(ctx, condition, comparison)
    parts = ["\nif(", condition, ")\n{\n", block_random(ctx)]
    if ctx.loop_depth != 0:
        choice = rng.randrange(3)
        if choice == 0:
            parts.append("\nbreak;\n")
        elif choice == 1:
            parts.append("\ncontinue;\n")
    parts.append("}\n")
    return "".join(parts)


def loop_random(ctx: GenerationContext) -> str:
    """Return a bounded for-loop; at most three loops are nested."""
    if ctx.loop_depth >= _MAX_LOOP_DEPTH:
        return ""
    rng = ctx.rng
    var = _LOOP_VARIABLES[ctx.loop_depth]
    ctx.loop_depth += 1
    try:
        parts: list[str] = []
        declared_outside = rng.randrange(2) == 1
        if declared_outside:
            parts.append(f"\n{{\nuint256 {var} = 0;\n")
        if rng.randrange(3) == 1 and ctx.loop_depth == 1:
            parts.append("l_z = 1;\n")
        if declared_outside:
            parts.append(f"for(;{var}<{rng.randrange(5) + 1};{var}++)\n{{\n")
        elif rng.randrange(2) == 0:
            bound = rng.randrange(10) + 1
            parts.append(f"for(uint256 {var}=0;{var}<{bound};{var}++)\n{{\n")
        else:
            parts.append(f"for(uint256 {var}=0;;{var}++)\n{{\n")
            parts.append(f"if({var}>{rng.randrange(5) + 1}){{break;}}\n")
        parts.append(block_random(ctx))
        parts.append(" \n }\n")
        if declared_outside:
            parts.append("}\n")
        return "".join(parts)
    finally:
        ctx.loop_depth -= 1


def block_random(ctx: GenerationContext) -> str:
    """Return one to five random statements; deep blocks hold only assignments."""
    rng = ctx.rng
    ctx.block_depth += 1
    if ctx.block_depth >= _MAX_BLOCK_DEPTH:
        # The depth is left raised here; it is reset for each new statement run.
        return "".join(assign_random(ctx) for _ in range(rng.randrange(5) + 1))
    parts: list[str] = []
    for _ in range(rng.randrange(5) + 1):
        kind = rng.randrange(10)
        if kind <= 2:
            parts.append(assign_random(ctx))
        elif kind <= 5:
            if ctx.loop_depth <= _MAX_LOOP_DEPTH:
                parts.append(loop_random(ctx))
        elif kind <= 8:
            parts.append(ifelse_random(ctx))
        else:
            parts.append(inline_assembly(ctx))
    ctx.block_depth -= 1
    return "".join(parts)


def statements_random(ctx: GenerationContext) -> str:
    """Return one to three top-level blocks forming a function body."""
    parts: list[str] = []
    for _ in range(ctx.rng.randrange(3) + 1):
        ctx.block_depth = 0
        parts.append(block_random(ctx))
    return "".join(parts)