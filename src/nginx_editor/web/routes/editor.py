"""
Editor API routes.

Endpoints:
- POST /api/format - Re-indent a configuration document
- POST /api/tokenize - Classify a document for syntax highlighting
"""

from pydantic import BaseModel, Field

from fastapi import APIRouter

from nginx_editor.engine.formatter import NginxFormatter
from nginx_editor.parser.tokenizer import iter_spans, iter_tokens

router = APIRouter()


class FormatRequest(BaseModel):
    """Format request."""
    content: str = Field(..., description="Full configuration text")


class FormatResponse(BaseModel):
    """Format response."""
    content: str
    changed: bool


class TokenizeRequest(BaseModel):
    """Tokenize request."""
    content: str = Field(..., description="Full configuration text")
    include_whitespace: bool = Field(False, description="Also return whitespace spans")


class TokenModel(BaseModel):
    """A classified span of the request content."""
    kind: str
    text: str
    start: int
    end: int


class TokenizeResponse(BaseModel):
    """Tokenize response."""
    tokens: list[TokenModel]


@router.post("/format", response_model=FormatResponse)
async def format_config(request: FormatRequest) -> FormatResponse:
    """Format the submitted document."""
    formatted = NginxFormatter().format(request.content)
    return FormatResponse(content=formatted, changed=formatted != request.content)


@router.post("/tokenize", response_model=TokenizeResponse)
async def tokenize_config(request: TokenizeRequest) -> TokenizeResponse:
    """Tokenize the submitted document."""
    stream = iter_spans(request.content) if request.include_whitespace else iter_tokens(request.content)
    return TokenizeResponse(tokens=[TokenModel(**t.to_dict()) for t in stream])
