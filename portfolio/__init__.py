"""Portfolio and blog site.

Exposes the installed distribution version as __version__.
"""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("portfolio-site")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
