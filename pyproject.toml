[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solfuzzgen"
version = "0.1.0"
description = "Random Solidity contract generator for differential testing of compilers and EVMs"
requires-python = ">=3.10"
dependencies = []
keywords = ["solidity", "fuzzing", "random testing", "contract generator", "evm", "inline assembly"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
solfuzzgen = "solfuzzgen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["solfuzzgen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
