"""Random Solidity contract generator for compiler and EVM testing."""

__version__ = "0.1.0"

__all__ = ["__version__"]