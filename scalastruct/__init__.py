"""scalastruct - Go struct generator for compiled Scala case classes."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("scalastruct")
except PackageNotFoundError:
    __version__ = "(local)"
