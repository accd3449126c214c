"""
Subpackage for cleaning the raw tables.

Removes columns that play no part in the merge and converts each
dataset's missing-value markers to NaN.
"""

__all__ = ["cleaning"]
