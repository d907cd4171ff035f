"""Utility for stripping the scope from an npm package name."""


def unscoped_name(package_name: str) -> str:
    """Return ``widgets`` for ``@scope/widgets``; unscoped names pass through."""
    if package_name.startswith("@") and "/" in package_name:
        return package_name.split("/", 1)[1]
    return package_name
