"""Logging helpers for title normalization."""

from .logger import NormalizationLogger

__all__ = ["NormalizationLogger"]
