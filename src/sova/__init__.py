"""sova: scaffolding tool for Go projects."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("sova")
except PackageNotFoundError:
    __version__ = "0.0.0"
