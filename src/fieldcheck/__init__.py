"""fieldcheck: rule-driven validation engine for flat records."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("fieldcheck")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
