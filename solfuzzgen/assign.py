"""Random assignment statements and arithmetic right-hand sides."""

from __future__ import annotations

import enum
from collections.abc import Callable

from .model import GenerationContext, Variable

_DIVISION_GUARD = "==0?1:"


class _Source(enum.Enum):
    SCALAR = enum.auto()
    ARRAY = enum.auto()
    CONSTANT = enum.auto()


class _Use(enum.Enum):
    READ = enum.auto()
    MUTATED = enum.auto()


def add_sub(ctx: GenerationContext, varname: str) -> str:
    """Return a pre- or post-increment or decrement of the variable."""
    return ctx.rng.choice(
        (f"{varname}++", f"{varname}--", f"++{varname}", f"--{varname}")
    )


def _read(
    ctx: GenerationContext,
    name: str,
    seen: dict[str, _Use],
    mutate: Callable[[], bool],
) -> str:
    """Read a name, mutating it at most once per expression."""
    use = seen.get(name)
    if use is None:
        if mutate():
            seen[name] = _Use.MUTATED
            return add_sub(ctx, name)
        seen[name] = _Use.READ
        return name
    if use is _Use.MUTATED:
        return str(ctx.rng.randrange(50))
    return name


def _operand(
    ctx: GenerationContext,
    source: _Source,
    var: Variable,
    seen: dict[str, _Use],
    array_mutates: Callable[[], bool],
) -> tuple[str, str]:
    rng = ctx.rng
    if source is _Source.SCALAR:
        return var.name, _read(ctx, var.name, seen, lambda: rng.randrange(4) == 1)
    if source is _Source.ARRAY:
        name = f"{var.name}[{rng.randrange(var.length)}]"
        return name, _read(ctx, name, seen, array_mutates)
    return var.name, var.name


def _cast_tail(ctx: GenerationContext, target: Variable, unsigned: bool) -> str:
    rng = ctx.rng
    if rng.randrange(2) != 0:
        return ""

    def cast(n: int) -> str:
        return f"{target.type_name}({n})"

    choice = rng.randrange(4)
    if choice == 0:
        return " + " + cast(rng.randrange(200))
    if choice == 1:
        lift = " + " + cast(rng.randrange(100) + 200) if unsigned else ""
        return lift + " - " + cast(rng.randrange(200))
    if choice == 2:
        divisor = cast(rng.randrange(5) + 1)
        return " / " + divisor + " * " + cast(rng.randrange(5))
    return " / " + cast(rng.randrange(20) + 1)


def _joiner(ctx: GenerationContext, unsigned: bool) -> tuple[str, str]:
    rng = ctx.rng
    choice = rng.randrange(4)
    if unsigned:
        choice = 0
    if choice == 0:
        return " + ", "+"
    if choice == 1:
        return " - ", "-"
    if choice == 2:
        return " / ", "/"
    return f"/{rng.randrange(200) + 1} * ", "*"


def _build_rvalue(
    ctx: GenerationContext,
    target: Variable,
    include_locals: bool,
    array_mutates: Callable[[], bool],
) -> str:
    scalars = ctx.state_vars + (ctx.local_vars if include_locals else [])
    pool = (
        [(_Source.SCALAR, v) for v in scalars]
        + [(_Source.ARRAY, v) for v in ctx.arrays]
        + [(_Source.CONSTANT, v) for v in ctx.const_vars]
    )
    if not pool:
        raise ValueError("no variables available to build an expression")
    rng = ctx.rng
    unsigned = target.type_name == "uint256"
    cast_name = "uint256" if unsigned else "int256"
    seen: dict[str, _Use] = {}
    terms = rng.randrange(3) + 1
    parts: list[str] = []
    preop = ""
    for term in range(terms):
        source, var = rng.choice(pool)
        name, after = _operand(ctx, source, var, seen, array_mutates)
        inner = f"{name}{_DIVISION_GUARD}{after}" if preop == "/" else after
        parts.append(f"{cast_name}({inner})")
        parts.append(_cast_tail(ctx, target, unsigned))
        if term != terms - 1:
            text, preop = _joiner(ctx, unsigned)
            parts.append(text)
    return "".join(parts)


def rvalue(ctx: GenerationContext, target: Variable) -> str:
    """Build an expression over state, local, array and constant variables."""
    return _build_rvalue(ctx, target, True, lambda: ctx.rng.randrange(4) >= 1)


def rvalue_state_only(ctx: GenerationContext, target: Variable) -> str:
    """Build an expression that uses no local variables."""
    return _build_rvalue(ctx, target, False, lambda: ctx.rng.randrange(4) == 1)


def _push(
    ctx: GenerationContext,
    array: Variable,
    make_rvalue: Callable[[GenerationContext, Variable], str],
) -> str:
    if ctx.rng.randrange(2) == 1:
        return f"{array.name}.push({make_rvalue(ctx, array)});\n"
    return f"{array.name}.push();\n"


def _assignment(
    ctx: GenerationContext,
    push_odds: int,
    targets: list[Variable],
    make_rvalue: Callable[[GenerationContext, Variable], str],
) -> str:
    if not ctx.arrays:
        raise ValueError("an array variable is required for assignments")
    rng = ctx.rng
    pushpop = rng.randrange(push_odds)
    array = rng.choice(ctx.arrays)
    if pushpop == 1:
        return _push(ctx, array, make_rvalue)
    if pushpop == 0 and array.length > 1 and ctx.loop_depth == 0:
        return _push(ctx, array, make_rvalue) + f"{array.name}.pop();\n"
    target = rng.choice(targets)
    if target.is_array():
        lhs = f"{target.name}[{rng.randrange(target.length)}]"
    else:
        lhs = target.name
    operator = rng.choice((" = ", " += ", " -= ", " = "))
    return f"{lhs}{operator}{make_rvalue(ctx, target)};\n"


def assign_random(ctx: GenerationContext) -> str:
    """Return a random assignment, push or push/pop statement."""
    targets = ctx.state_vars + ctx.local_vars + ctx.arrays
    return "\n" + _assignment(ctx, 10, targets, rvalue)


def assign_random_state_only(ctx: GenerationContext) -> str:
    """Return a random statement that touches no local variables."""
    targets = ctx.state_vars + ctx.arrays
    return _assignment(ctx, 5, targets, rvalue_state_only)