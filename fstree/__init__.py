"""
fstree - render a directory subtree as a text tree diagram
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("fstree")
except PackageNotFoundError:
    # Package is not installed, likely in development mode
    __version__ = "dev"

__all__ = ["__version__"]
