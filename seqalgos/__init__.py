"""Two-pointer, greedy and sliding-window algorithms over sequences and strings."""

__version__ = "0.1.0"
__all__ = ["cli", "greedy", "substrings", "two_pointers", "windows"]