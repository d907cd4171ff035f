"""Exceptions raised while building and rendering the documentation site."""


class ApiDocumenterError(Exception):
    """Base exception for the documenter."""


class StructureError(ApiDocumenterError):
    """A document node was appended to a parent kind that does not allow it."""


class ConfigurationError(ApiDocumenterError):
    """Invalid node registration or documenter configuration."""


class UnsupportedKindError(ApiDocumenterError):
    """An item or document node kind has no handling branch."""

    def __init__(self, kind: str, where: str | None = None) -> None:
        """Build the message from the offending kind and, if known, the item."""
        self.kind = kind
        self.where = where
        msg = f"Unsupported kind: {kind}"
        if where:
            msg += f" ({where})"
        super().__init__(msg)


class InputError(ApiDocumenterError):
    """An input file could not be read as an API report."""
