"""Search for cyclotomic integers of small house, with residue arithmetic helpers."""

__version__ = "0.1.0"
__all__ = ["cyclotomic", "integers", "search"]