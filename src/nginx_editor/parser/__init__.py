"""Parser package - Turns configuration text into classified tokens.

The tokenizer is a pure function of its input text; it performs no I/O and
keeps no state between documents.
"""

from nginx_editor.parser.tokenizer import (
    NginxTokenizer,
    iter_spans,
    iter_tokens,
    token_at,
    tokenize,
)
from nginx_editor.parser.vocabulary import BLOCK_KEYWORDS, DIRECTIVES, classify

__all__ = [
    "BLOCK_KEYWORDS",
    "DIRECTIVES",
    "NginxTokenizer",
    "classify",
    "iter_spans",
    "iter_tokens",
    "token_at",
    "tokenize",
]
