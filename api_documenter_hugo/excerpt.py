"""Token sequences for type and signature fragments."""

from dataclasses import dataclass, field
from typing import Any


class ExcerptTokenKind:
    """Literal text, or a reference to another declaration."""

    CONTENT = "Content"
    REFERENCE = "Reference"


@dataclass(frozen=True)
class ExcerptToken:
    """One token of an excerpt."""

    kind: str
    text: str
    canonical_reference: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "ExcerptToken":
        """Build a token from its ``excerptTokens`` entry."""
        return cls(
            kind=data.get("kind", ExcerptTokenKind.CONTENT),
            text=data.get("text", ""),
            canonical_reference=data.get("canonicalReference"),
        )


@dataclass(frozen=True)
class TokenRange:
    """Half-open index range into an item's token list."""

    start_index: int
    end_index: int

    @classmethod
    def from_json(cls, data: dict[str, Any] | None) -> "TokenRange":
        """Read a ``*TokenRange`` field; a missing range is empty."""
        if not data:
            return cls(0, 0)
        return cls(int(data.get("startIndex", 0)), int(data.get("endIndex", 0)))


@dataclass
class Excerpt:
    """A slice of an item's tokens."""

    tokens: list[ExcerptToken] = field(default_factory=list)
    token_range: TokenRange | None = None

    @property
    def spanned_tokens(self) -> list[ExcerptToken]:
        """The tokens covered by the range (all tokens when no range is set)."""
        if self.token_range is None:
            return list(self.tokens)
        return self.tokens[self.token_range.start_index : self.token_range.end_index]

    @property
    def text(self) -> str:
        """Concatenated token text."""
        return "".join(token.text for token in self.spanned_tokens)
