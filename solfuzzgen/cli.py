"""Command that writes a suite of randomly generated contracts to disk."""

from __future__ import annotations

import argparse
import random
from pathlib import Path

from .frame import get_frame
from .model import GenerationContext

_CONTRACT_FILE = "ContractName.sol"


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate random Solidity contracts for differential testing."
    )
    parser.add_argument(
        "-o", "--output", type=Path, default=Path("testsuite"),
        help="directory that receives one sub-directory per contract",
    )
    parser.add_argument(
        "-n", "--count", type=int, default=10000, help="number of contracts to generate"
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the generator")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Generate the contracts, each into ``<output>/test<i>/ContractName.sol``."""
    args = _parse_args(argv)
    ctx = GenerationContext(rng=random.Random(args.seed))
    for index in range(args.count):
        source = get_frame(ctx)
        print(f"********{index}********")
        contract_dir = args.output / f"test{index}"
        try:
            contract_dir.mkdir(parents=True, exist_ok=True)
            (contract_dir / _CONTRACT_FILE).write_text(source, encoding="utf-8")
        except OSError:
            print("could not open")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())