"""Post-processing helpers for the companion README."""

from .markers import MarkerManager

__all__ = ["MarkerManager"]
