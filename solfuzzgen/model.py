"""Data shared by the contract generators: variables, functions and generation state."""

from __future__ import annotations

import random
from dataclasses import dataclass, field


@dataclass
class Variable:
    """A declared Solidity variable; a non-zero ``length`` marks an array."""

    type_name: str
    name: str
    value: int = 0
    length: int = 0
    inner_length: int = 0

    def is_array(self) -> bool:
        """Return True when the variable is an array."""
        return self.length > 0


@dataclass
class FunctionInfo:
    """A generated function or inline-assembly function.

    Visibility codes follow the generator: 0 public, 1 external, 2 private,
    3 internal.  The parameter count only matters for assembly functions and
    takes no part in equality.
    """

    name: str
    visibility: int = 0
    return_param: str = ""
    param_count: int = field(default=0, compare=False)


@dataclass
class GenerationContext:
    """Mutable state threaded through the generation of one contract."""

    rng: random.Random = field(default_factory=random.Random)
    state_vars: list[Variable] = field(default_factory=list)
    local_vars: list[Variable] = field(default_factory=list)
    global_vars: list[Variable] = field(default_factory=list)
    arrays: list[Variable] = field(default_factory=list)
    arrays_backup: list[Variable] = field(default_factory=list)
    const_vars: list[Variable] = field(default_factory=list)
    assembly_vars: list[Variable] = field(default_factory=list)
    functions: list[FunctionInfo] = field(default_factory=list)
    function_returns: list[FunctionInfo] = field(default_factory=list)
    assembly_functions: list[FunctionInfo] = field(default_factory=list)
    current_function: str = ""
    loop_depth: int = 0
    block_depth: int = 0
    event_declaration: str = ""
    emit_statement: str = ""

    def reset_contract(self) -> None:
        """Forget the contract-level declarations once a contract is finished."""
        self.state_vars.clear()
        self.arrays.clear()
        self.arrays_backup.clear()
        self.const_vars.clear()