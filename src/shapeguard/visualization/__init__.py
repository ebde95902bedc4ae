"""
Visualization module for composed guards.

Renders a guard and its children as a terminal tree.
"""

from shapeguard.visualization.tree import guard_tree, render_guard_tree

__all__ = ["guard_tree", "render_guard_tree"]
