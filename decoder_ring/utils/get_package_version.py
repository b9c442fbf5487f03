"""Get decoder-ring package version (cached)."""

import importlib.metadata as importlib_metadata

# Package version - cached for performance
_VERSION_CACHE = None


def get_package_version() -> str:
    """Get decoder-ring package version (cached)."""
    global _VERSION_CACHE
    if _VERSION_CACHE is None:
        try:
            _VERSION_CACHE = importlib_metadata.version("decoder-ring")
        except importlib_metadata.PackageNotFoundError:
            _VERSION_CACHE = "(unknown)"
    return _VERSION_CACHE
