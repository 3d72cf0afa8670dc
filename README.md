# solfuzzgen

`solfuzzgen` writes random Solidity (`pragma solidity ^0.8.0`) contracts for
testing compilers and EVM implementations against each other.

Each generated source file holds a contract `ContractName` with:

- one to three state variables (`uint256` or `int256`, declared `public`),
  one or two `uint256` constants and one or two dynamic `uint[]` arrays;
- an event `testtest` taking every state variable, emitted at the end of each
  function so that runs can be compared by their logs;
- three public functions, `func_a`, `func_b` and `func_c`, each with one or two
  local variables, a body wrapped in `unchecked { ... }` and built from random
  assignments, array `push`/`pop`, `if` statements with compound conditions,
  bounded `for` loops (at most three deep, with `break` / `continue` inside
  loops) and inline `assembly` blocks with assembly functions, loops and
  conditions. A function may return a `uint256` or `int256` named `b_a`.

About one file in fifty also holds a helper contract `D`; `func_c` then may
return `new D()` and `func_b` reads `func_c().func_a.selector`.

## Installation

```
pip install .
```

No third-party libraries are needed at run time.

## Command line

```
solfuzzgen [-o OUTPUT] [-n COUNT] [--seed SEED]
```

- `-o`, `--output`: directory receiving one sub-directory per contract
  (default `testsuite`);
- `-n`, `--count`: number of contracts to generate (default `10000`);
- `--seed`: seed for the random generator, for reproducible suites.

Contract `i` is written to `OUTPUT/test<i>/ContractName.sol`, and
`********<i>********` is printed for each. If a file cannot be written,
`could not open` is printed and generation carries on.

## As a library

```python
import random

from solfuzzgen.model import GenerationContext
from solfuzzgen.frame import get_frame
from solfuzzgen.script import generate_script

ctx = GenerationContext(rng=random.Random(42))
source = get_frame(ctx)        # full Solidity source of one file
script = generate_script()     # Hardhat test script calling func_a, func_b and func_c
```

All generation state (declared variables, arrays, constants, loop and block
depth, assembly variables and functions, the event and emit text) lives in the
`GenerationContext` together with the `random.Random` it draws from, so
separate contexts do not interfere and a seeded context gives the same output
each time.

The building blocks can be used on their own:

- `solfuzzgen.variables`: `get_name`, `gen_variable`, `gen_array`,
  `gen_const_variable`, `random_address` and friends;
- `solfuzzgen.assign`: `assign_random`, `assign_random_state_only`, `rvalue`,
  `rvalue_state_only`, `add_sub`;
- `solfuzzgen.control`: `block_random`, `ifelse_random`, `loop_random`,
  `statements_random`, `return_int`, `return_bool`, `bool_return_bool`;
- `solfuzzgen.assembly`: `inline_assembly`, `assembly_op`, `assembly_for`,
  `assembly_if`, `assembly_function`, `call_assembly_function`;
- `solfuzzgen.function`: `gen_function`;
- `solfuzzgen.frame`: `get_frame`, `gen_other_contract`.

Generators that need variables to work with raise `ValueError` when the
context holds none (for example, an assignment with no array declared).

## What it does not do

The package only writes source text. It does not compile the contracts, run
them or compare their results; the command does not write the test script
either, which is available only through `generate_script()`.

## Running the tests

```
pip install ".[test]"
pytest
```