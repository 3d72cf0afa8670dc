"""The JavaScript test script that calls the generated contract's functions."""

from __future__ import annotations

_TESTED_FUNCTIONS = ("func_a", "func_b", "func_c")

_HEADER = (
    'const {expect} = require("chai");\n'
    'const {loadFixture} = require("@nomicfoundation/hardhat-network-helpers");\n'
    'const web3 = require("web3");\n\n'
    'describe("ContractName",function(){\n'
)

_FIXTURE = (
    "\tasync function deployOneYearLockFixture(){\n"
    '\t\tconst _Contract = await ethers.getContractFactory("ContractName");\n'
    "\t\tconst [account0,account1,account2] = await ethers.getSigners();\n"
    "\t\tconst _contract = await _Contract.deploy();\n"
    "\t\treturn {_contract,account0,account1,account2};"
    "\n\t}\n\n"
)


def _describe(func_name: str) -> str:
    return (
        f'\tdescribe("{func_name}", function(){{\n'
        f'\t\tit("testing {func_name}", async function() {{\n'
        "\t\t\tconst {_contract, account0, account1, account2} = "
        "await loadFixture(deployOneYearLockFixture);\n"
        f"\t\t\tawait _contract.connect(account0).{func_name}();\n"
        "\t\t\tconst filter = {\n\t\t\t\tfromBlock:0,\n\t\t\t\ttoBlock : 50\n\t\t\t}\n"
        "\t\t\tconst events = await _contract.runner.provider.getLogs(filter);\n"
        "\t\t\tconst parseEvents = events.map((event) => _contract.interface.parseLog(event));\n"
        "\t\t\tfor (var i = 0; i < parseEvents.length; i++) {\n"
        '\t\t\t\tif (parseEvents[i].name == "testtest") {\n'
        "\t\t\t\t\tfor (var j = 0; j < parseEvents[i].args.length; j++) {\n"
        "\t\t\t\t\t\tconsole.log('', parseEvents[i].args[j]);\n"
        "\t\t\t\t\t}\n\t\t\t\t}\n\t\t\t}\n\t\t});\n\t});\n"
    )


def generate_script() -> str:
    """Return a test script that calls each function and logs its events."""
    body = "".join(_describe(name) for name in _TESTED_FUNCTIONS)
    return _HEADER + _FIXTURE + body + "});"