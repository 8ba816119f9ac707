"""Classic data-structure and algorithm drills."""

__version__ = "0.1.0"
__all__ = ["numbers", "arrays", "sorting", "text", "linkedlist", "stacks"]