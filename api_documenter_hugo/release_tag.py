"""Release stability tags."""

from enum import Enum


class ReleaseTag(str, Enum):
    """Stability level of a declaration, as recorded by api-extractor."""

    NONE = "None"
    INTERNAL = "Internal"
    ALPHA = "Alpha"
    BETA = "Beta"
    PUBLIC = "Public"

    @classmethod
    def parse(cls, value: str | None) -> "ReleaseTag":
        """Map a ``releaseTag`` field to a tag; unknown values mean ``NONE``."""
        for tag in cls:
            if tag.value == value:
                return tag
        return cls.NONE
