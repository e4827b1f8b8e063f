"""Version information for requisites."""

__version__ = "0.1.0"


def get_version() -> str:
    """Return the package version string."""
    return __version__
