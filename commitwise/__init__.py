"""AI-assisted conventional commit message suggestions."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("commitwise")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
