"""
Subpackage for downloading the raw source datasets.

Each function accepts an output directory where the downloaded file
should be stored.
"""

__all__ = ["sources"]
