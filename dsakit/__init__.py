"""Classic data-structure routines: binary trees, bounded queues and stack algorithms."""

__version__ = "0.1.0"
__all__ = ["queues", "stacks", "tree"]