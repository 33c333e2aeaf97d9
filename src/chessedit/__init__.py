"""Terminal board editor driven by partial algebraic move notation."""

__version__ = "0.1.0"
