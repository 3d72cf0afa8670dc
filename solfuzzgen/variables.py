"""Declarations of state, local, array and constant variables."""

from __future__ import annotations

import random

from .model import GenerationContext, Variable

_ADDRESS_DIGITS = 40
_LARGE_CONSTANT = "0xfffffffffffffffffffffffffffffffffffffffffffffffe"


def get_name(n: int) -> str:
    """Return the short identifier used for the n-th declaration."""
    prefix = "a" if n // 26 == 1 else ""
    return prefix + chr(ord("a") + n % 26)


def random_uint256(rng: random.Random) -> str:
    """Return a small unsigned literal."""
    return str(rng.randrange(255))


def random_int256(rng: random.Random) -> str:
    """Return a small signed-compatible literal."""
    return str(rng.randrange(255))


def random_address(rng: random.Random) -> str:
    """Return a hexadecimal-looking address literal of zero padding and digits."""
    n = rng.randrange(_ADDRESS_DIGITS)
    padding = "0" * (_ADDRESS_DIGITS - n)
    digits = "".join(str(rng.randrange(10)) for _ in range(n, _ADDRESS_DIGITS))
    return "0x" + padding + digits


def gen_variable(
    ctx: GenerationContext, var_list: list[Variable], index: int, is_local: bool
) -> str:
    """Declare a uint256 or int256 variable, record it and return its source."""
    rng = ctx.rng
    name = get_name(index)
    if is_local:
        name = "l_" + name
    visibility = "" if is_local else " public "
    if rng.randrange(2) == 0:
        value = random_uint256(rng)
        var_list.append(Variable("uint256", name, int(value)))
        text = f"\n\tuint256 {visibility}{name} = {value}"
    else:
        value = int(random_int256(rng))
        if rng.randrange(2) == 0:
            value = -value
        text = f"\n\tint256 {visibility}{name} = {random_int256(rng)}"
        var_list.append(Variable("int256", name, value))
    return text + ";\n"


def gen_array(ctx: GenerationContext, var_list: list[Variable], index: int) -> str:
    """Declare a dynamic uint array with three to five initial elements."""
    rng = ctx.rng
    length = rng.randrange(3) + 3
    name = "Array" + get_name(index)
    elements = ",".join(str(rng.randrange(65)) for _ in range(length))
    var_list.append(Variable("uint256", name, length=length))
    return f"\tuint[] {name} = [{elements}];\n"


def gen_const_variable(ctx: GenerationContext, var_list: list[Variable], index: int) -> str:
    """Declare a uint256 constant, either small or close to the type's maximum."""
    name = "const_" + get_name(index)
    if ctx.rng.randrange(2) == 1:
        value = str(ctx.rng.randrange(50))
    else:
        value = _LARGE_CONSTANT
    var_list.append(Variable("uint256", name))
    return f"uint256 constant {name} = {value};\n"