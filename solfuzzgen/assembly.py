"""Random inline-assembly blocks: variables, helper functions, loops and conditions."""

from __future__ import annotations

from .model import FunctionInfo, GenerationContext, Variable
from .variables import get_name

_OPCODES = ("add", "sub", "mul", "div", "mod")
_COMPARISONS = ("eq", "lt", "gt")
_PARAMETER_LISTS = ("", "x", "x,y")
_ASSEMBLY_VAR_COUNT = 1
_MAX_NESTING = 2
_MAX_OP_DEPTH = 3


def _lvalue(ctx: GenerationContext) -> str:
    """Pick a local or assembly variable that can be assigned to."""
    pool = ctx.local_vars + ctx.assembly_vars
    if not pool:
        raise ValueError("no local or assembly variable to assign to")
    return ctx.rng.choice(pool).name


def _rvalue(ctx: GenerationContext) -> str:
    """Pick a local or assembly variable, or now and then a literal."""
    pool = ctx.local_vars + ctx.assembly_vars
    if not pool:
        raise ValueError("no local or assembly variable to read")
    count = len(pool)
    pick = ctx.rng.randrange(count + count // 2)
    if pick < count:
        return pool[pick].name
    return str(ctx.rng.randrange(100))


def _mload(ctx: GenerationContext) -> str:
    return f"mload({ctx.rng.randrange(10)})"


def _operand(ctx: GenerationContext, depth: int) -> str:
    choice = ctx.rng.randrange(5)
    if choice == 0:
        return _rvalue(ctx)
    if choice == 1:
        return _mload(ctx)
    if choice in (2, 3):
        return str(ctx.rng.randrange(50))
    return assembly_op(ctx, depth + 1)


def assembly_op(ctx: GenerationContext, depth: int) -> str:
    """Return an arithmetic opcode call; at depth 0 it is assigned to a variable."""
    rng = ctx.rng
    if depth >= _MAX_OP_DEPTH:
        return str(rng.randrange(50) + 1)
    lhs = f"{_lvalue(ctx)} := " if depth == 0 else ""
    opcode = rng.choice(_OPCODES)
    first = _operand(ctx, depth)
    second = _operand(ctx, depth)
    return f"{lhs}{opcode}({first},{second})"


def _mstore(ctx: GenerationContext) -> str:
    rng = ctx.rng
    slot = rng.randrange(10)
    choice = rng.randrange(4)
    if choice == 0:
        value = str(rng.randrange(50))
    elif choice == 1:
        value = _rvalue(ctx)
    else:
        value = assembly_op(ctx, 1)
    return f"mstore({slot},{value})"


def _assign_statements(ctx: GenerationContext, count: int) -> str:
    rng = ctx.rng
    parts: list[str] = []
    for _ in range(count):
        choice = rng.randrange(6)
        if choice <= 2:
            parts.append(assembly_op(ctx, 0) + "\n")
        elif choice == 3:
            parts.append(_mstore(ctx) + "\n")
        elif choice == 4:
            parts.append(f"{_lvalue(ctx)}:={_mload(ctx)}\n")
        elif rng.randrange(3) == 1:
            target = _lvalue(ctx)
            parts.append(f"{target}:={call_assembly_function(ctx)}\n")
    return "".join(parts)


def assembly_for(ctx: GenerationContext, depth: int) -> str:
    """Return an assembly for-loop, possibly holding a nested loop or condition."""
    if depth >= _MAX_NESTING:
        return ""
    rng = ctx.rng
    var = "assemblyfor_" + chr(ord("i") + depth)
    bound = rng.randrange(10)
    header = f"for {{let {var} := 0}} lt({var},{bound}) {{{var} := add({var},1)}}\n{{\n"
    body = _assign_statements(ctx, rng.randrange(2))
    choice = rng.randrange(3)
    if choice == 0:
        nested = assembly_for(ctx, depth + 1)
    elif choice == 1:
        nested = assembly_if(ctx, depth + 1)
    else:
        nested = ""
    tail = _assign_statements(ctx, rng.randrange(2))
    return header + body + nested + tail + "}\n"


def assembly_if(ctx: GenerationContext, depth: int) -> str:
    """Return an assembly if-statement comparing two assembly variables."""
    if depth >= _MAX_NESTING:
        return ""
    if not ctx.assembly_vars:
        raise ValueError("an assembly variable is required for a condition")
    rng = ctx.rng
    comparison = rng.choice(_COMPARISONS)
    left = rng.choice(ctx.assembly_vars).name
    right = rng.choice(ctx.assembly_vars).name
    header = f"if {comparison}({left},{right})\n{{\n"
    body = _assign_statements(ctx, rng.randrange(2))
    choice = rng.randrange(3)
    if choice == 0:
        nested = assembly_if(ctx, depth + 1)
    elif choice == 1:
        nested = assembly_for(ctx, depth + 1)
    else:
        nested = ""
    tail = _assign_statements(ctx, rng.randrange(2))
    return header + body + nested + tail + "}\n"


def assembly_function(ctx: GenerationContext, index: int) -> str:
    """Declare an assembly function with zero to two parameters and record it."""
    rng = ctx.rng
    name = "assemblyfunc_" + get_name(index)
    param_count = rng.randrange(3)
    params = _PARAMETER_LISTS[param_count]
    ret = "return(0,0)\n" if rng.randrange(3) == 0 else ""
    ctx.assembly_functions.append(FunctionInfo(name, param_count=param_count))
    return f"function {name}({params}) -> r {{ \n{ret}}}\n"


def _call_argument(ctx: GenerationContext) -> str:
    rng = ctx.rng
    if rng.randrange(5) != 1:
        return _rvalue(ctx)
    inner = rng.choice(ctx.assembly_functions)
    args = ",".join(_rvalue(ctx) for _ in range(inner.param_count))
    return f"{inner.name}({args})"


def call_assembly_function(ctx: GenerationContext) -> str:
    """Return a call of a declared assembly function, arguments possibly nested calls."""
    if not ctx.assembly_functions:
        raise ValueError("no assembly function has been declared")
    func = ctx.rng.choice(ctx.assembly_functions)
    args = ",".join(_call_argument(ctx) for _ in range(func.param_count))
    return f"{func.name}({args})\n"


def inline_assembly(ctx: GenerationContext) -> str:
    """Return a complete inline-assembly block with fresh variables and functions."""
    rng = ctx.rng
    ctx.assembly_functions.clear()
    ctx.assembly_vars.clear()
    parts = ["assembly{\n"]
    for index in range(_ASSEMBLY_VAR_COUNT):
        name = "aa" + get_name(index)
        value = rng.randrange(10)
        parts.append(f"let {name}:= {value}\n")
        ctx.assembly_vars.append(Variable("assemblyvar", name, value))
    for index in range(rng.randrange(3) + 1):
        parts.append(assembly_function(ctx, index))
    parts.append(_assign_statements(ctx, rng.randrange(2) + 1))
    for _ in range(rng.randrange(2) + 1):
        choice = rng.randrange(3)
        if choice == 0:
            parts.append(assembly_for(ctx, 0))
        elif choice == 1:
            parts.append(assembly_if(ctx, 0))
    parts.append("}\n")
    return "".join(parts)