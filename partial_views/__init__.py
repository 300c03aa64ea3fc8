"""Partial view rendering"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("partial-views")
except PackageNotFoundError:
    __version__ = "dev"
