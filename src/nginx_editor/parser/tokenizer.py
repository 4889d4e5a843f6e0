"""Nginx Configuration Tokenizer.

Splits configuration text into classified spans for syntax highlighting.

IMPORTANT DESIGN NOTES:
1. The tokenizer never raises. Unterminated strings, stray braces and unknown
   names all get a best-effort classification.
2. The span stream is contiguous: joining every span's text gives back the
   input exactly. Whitespace runs are emitted as PLAIN spans so this holds;
   the classified stream (``iter_tokens``/``tokenize``) drops them.
3. Every span is at least one character long, so scanning always terminates.
"""

import re
from typing import Iterator

from nginx_editor.model.token import Token, TokenKind
from nginx_editor.parser.vocabulary import classify


class NginxTokenizer:
    """Cursor-based tokenizer over a single configuration document.

    Example:
        >>> [t.text for t in NginxTokenizer("listen 80;") if not t.is_whitespace]
        ['listen', '80', ';']
    """

    WHITESPACE_RE = re.compile(r"\s+")

    # Example: # managed by certbot
    COMMENT_RE = re.compile(r"#[^\n]*")

    # Example: 65s, 1.5, 64k, 10m, -1, 100ms
    NUMBER_RE = re.compile(r"(-?)(\d+)(\.\d*)?(ms|[smhdwMykKgG]b?|b)?")

    # Example: $host, ${request_uri}
    VARIABLE_RE = re.compile(r"\$[A-Za-z0-9_]+|\$\{[A-Za-z0-9_]+\}")

    # Example: proxy_set_header, localhost:
    IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_:]*")

    QUOTES = "\"'"

    def __init__(self, source: str, pos: int = 0) -> None:
        self.source = source
        self.pos = max(0, min(pos, len(source)))

    def reset(self, pos: int = 0) -> None:
        """Move the cursor back so the document can be scanned again."""
        self.pos = max(0, min(pos, len(self.source)))

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def next_token(self) -> Token | None:
        """Scan one span at the cursor and advance past it.

        Returns:
            The span, or None once the cursor has reached end of text.
        """
        if self.at_end:
            return None

        start = self.pos
        kind, end = self._scan(start)
        self.pos = end
        return Token(kind=kind, text=self.source[start:end], start=start, end=end)

    def _scan(self, pos: int) -> tuple[TokenKind, int]:
        """Classify the span starting at ``pos`` and return its end offset."""
        source = self.source
        char = source[pos]

        match = self.WHITESPACE_RE.match(source, pos)
        if match:
            return TokenKind.PLAIN, match.end()

        if char == "#":
            return TokenKind.COMMENT, self.COMMENT_RE.match(source, pos).end()

        if char in "{}":
            return TokenKind.BRACE, pos + 1

        if char in self.QUOTES:
            return TokenKind.STRING, self._scan_string(pos)

        match = self.NUMBER_RE.match(source, pos)
        if match:
            sign, _digits, fraction, unit = match.groups()
            # A bare integer is an ordinary argument (ports, counts)
            if sign or fraction or unit:
                return TokenKind.NUMBER, match.end()
            return TokenKind.PLAIN, match.end()

        match = self.VARIABLE_RE.match(source, pos)
        if match:
            return TokenKind.VARIABLE, match.end()

        match = self.IDENTIFIER_RE.match(source, pos)
        if match:
            return classify(match.group()), match.end()

        if char == ";":
            return TokenKind.PUNCTUATION, pos + 1

        return TokenKind.PLAIN, pos + 1

    def _scan_string(self, pos: int) -> int:
        """Return the offset just past the string literal opened at ``pos``.

        A backslash escapes the next character, including the quote itself.
        An unterminated literal runs to end of input.
        """
        source = self.source
        quote = source[pos]
        i = pos + 1
        while i < len(source):
            char = source[i]
            if char == "\\":
                i += 2
                continue
            i += 1
            if char == quote:
                break
        return min(i, len(source))

    def __iter__(self) -> Iterator[Token]:
        """Yield every remaining span, whitespace included."""
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token


def iter_spans(source: str) -> Iterator[Token]:
    """Lazily yield the full contiguous span stream of ``source``."""
    return iter(NginxTokenizer(source))


def iter_tokens(source: str) -> Iterator[Token]:
    """Lazily yield classified tokens, skipping whitespace spans."""
    for token in NginxTokenizer(source):
        if not token.is_whitespace:
            yield token


def token_at(source: str, offset: int) -> Token | None:
    """Scan the single span that starts at ``offset``."""
    return NginxTokenizer(source, offset).next_token()


def tokenize(source: str) -> list[Token]:
    """Convenience function to tokenize a source string."""
    return list(iter_tokens(source))
