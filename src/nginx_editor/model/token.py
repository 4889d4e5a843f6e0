"""Token dataclass - A classified span of configuration text."""

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Classification of a token for syntax highlighting."""

    COMMENT = "comment"  # "# ..." to end of line
    BRACE = "brace"  # { or }
    STRING = "string"  # "..." or '...'
    NUMBER = "number"  # 65s, 1.5, 64k, -1
    VARIABLE = "variable"  # $host, ${host}
    KEYWORD = "keyword"  # block markers: http, server, location
    DIRECTIVE = "directive"  # known directive names
    PUNCTUATION = "punctuation"  # ;
    PLAIN = "plain"  # everything else, including whitespace spans


@dataclass(frozen=True)
class Token:
    """A contiguous span of the source text with a semantic kind.

    Attributes:
        kind: What the span is.
        text: The exact source characters, ``source[start:end]``.
        start: Offset of the first character.
        end: Offset one past the last character.
    """

    kind: TokenKind
    text: str
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_whitespace(self) -> bool:
        """True for the whitespace spans that classified output skips."""
        return self.kind == TokenKind.PLAIN and self.text.isspace()

    def to_dict(self) -> dict[str, object]:
        return {
            "kind": self.kind.value,
            "text": self.text,
            "start": self.start,
            "end": self.end,
        }

    def __str__(self) -> str:
        return f"{self.kind.value}({self.text!r})@{self.start}:{self.end}"
