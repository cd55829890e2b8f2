"""
KNIME Extension entry point.

This module imports and registers the Shapiro-Wilk normality test node.
"""

from .shapiro_wilk_node import ShapiroWilkNode

__all__ = ["ShapiroWilkNode"]
