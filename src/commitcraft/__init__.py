"""commitcraft — conventional commits from an interactive prompt."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("commitcraft")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"
