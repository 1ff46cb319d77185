"""Sort distinct integers with the push_swap stack operations."""

__version__ = "0.1.0"
__all__ = ["stacks", "sorting", "parse", "cli"]