"""
Subpackage for describing the merged state-year table.
"""

__all__ = ["summary", "visualizations"]
