"""Composition utilities: pipe() function."""

from result_ex.compose.pipe import pipe

__all__ = [
    'pipe',
]
