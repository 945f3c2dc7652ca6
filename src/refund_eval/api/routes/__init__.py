"""Route group exports."""

from . import evaluations, health

__all__ = ["evaluations", "health"]
