"""Tests for the nginx configuration tokenizer."""

import pytest

from nginx_editor.model.token import Token, TokenKind
from nginx_editor.parser.tokenizer import (
    NginxTokenizer,
    iter_spans,
    iter_tokens,
    token_at,
    tokenize,
)


def kinds(source):
    return [(t.kind, t.text) for t in tokenize(source)]


class TestClassification:
    """Each rule produces the expected token kind."""

    def test_block_keyword_and_brace(self):
        assert kinds("http {") == [
            (TokenKind.KEYWORD, "http"),
            (TokenKind.BRACE, "{"),
        ]

    def test_directive_with_bare_integer_argument(self):
        """A bare port number stays an ordinary argument."""
        assert kinds("listen 80;") == [
            (TokenKind.DIRECTIVE, "listen"),
            (TokenKind.PLAIN, "80"),
            (TokenKind.PUNCTUATION, ";"),
        ]

    def test_duration_is_number(self):
        assert kinds("keepalive_timeout 65s;") == [
            (TokenKind.DIRECTIVE, "keepalive_timeout"),
            (TokenKind.NUMBER, "65s"),
            (TokenKind.PUNCTUATION, ";"),
        ]

    @pytest.mark.parametrize("literal", ["1.5", "-1", "64k", "10m", "100ms", "1M", "2g", "512b"])
    def test_numeric_literals(self, literal):
        assert kinds(literal) == [(TokenKind.NUMBER, literal)]

    def test_keyword_match_is_case_insensitive(self):
        assert kinds("HTTP Server") == [
            (TokenKind.KEYWORD, "HTTP"),
            (TokenKind.KEYWORD, "Server"),
        ]

    def test_keyword_without_following_brace(self):
        """upstream's 'server' line is still a keyword."""
        assert kinds("server 127.0.0.1:8080;")[0] == (TokenKind.KEYWORD, "server")

    def test_directive_match_is_case_insensitive(self):
        assert kinds("Proxy_Pass")[0] == (TokenKind.DIRECTIVE, "Proxy_Pass")

    def test_unknown_identifier_is_plain(self):
        assert kinds("my_custom_thing on;")[0] == (TokenKind.PLAIN, "my_custom_thing")

    def test_identifier_may_contain_colon(self):
        """'http:' in a URL is not the http block keyword."""
        result = kinds("proxy_pass http://backend;")
        assert result[0] == (TokenKind.DIRECTIVE, "proxy_pass")
        assert result[1] == (TokenKind.PLAIN, "http:")
        assert result[-1] == (TokenKind.PUNCTUATION, ";")

    def test_variables(self):
        assert kinds("$host ${request_uri} $1") == [
            (TokenKind.VARIABLE, "$host"),
            (TokenKind.VARIABLE, "${request_uri}"),
            (TokenKind.VARIABLE, "$1"),
        ]

    def test_lone_dollar_is_plain(self):
        assert kinds("$ ;") == [
            (TokenKind.PLAIN, "$"),
            (TokenKind.PUNCTUATION, ";"),
        ]

    def test_comment_runs_to_end_of_line(self):
        tokens = tokenize("# managed by certbot\nlisten 443;")
        assert tokens[0].kind == TokenKind.COMMENT
        assert tokens[0].text == "# managed by certbot"
        assert tokens[1] == Token(TokenKind.DIRECTIVE, "listen", 21, 27)

    def test_trailing_comment_after_directive(self):
        result = kinds("gzip on; # compress")
        assert result[-1] == (TokenKind.COMMENT, "# compress")

    def test_other_characters_are_single_plain_tokens(self):
        assert kinds("~ /") == [
            (TokenKind.PLAIN, "~"),
            (TokenKind.PLAIN, "/"),
        ]


class TestStrings:
    """Quoted string scanning."""

    def test_double_and_single_quotes(self):
        assert kinds("\"a b\" 'c d'") == [
            (TokenKind.STRING, '"a b"'),
            (TokenKind.STRING, "'c d'"),
        ]

    def test_escaped_quote_stays_inside_string(self):
        source = '"a\\"b"'
        tokens = tokenize(source)
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.STRING
        assert tokens[0].text == source

    def test_other_quote_does_not_close(self):
        assert kinds("\"it's\"") == [(TokenKind.STRING, "\"it's\"")]

    def test_quote_inside_comment_terminates(self):
        tokens = tokenize('# "unterminated')
        assert tokens == [Token(TokenKind.COMMENT, '# "unterminated', 0, 15)]

    def test_unterminated_string_runs_to_end_of_input(self):
        source = 'return 200 "oops;\nlisten 80;'
        tokens = tokenize(source)
        assert tokens[-1].kind == TokenKind.STRING
        assert tokens[-1].text == '"oops;\nlisten 80;'
        assert tokens[-1].end == len(source)

    def test_trailing_backslash_in_unterminated_string(self):
        tokens = tokenize('"abc\\')
        assert tokens == [Token(TokenKind.STRING, '"abc\\', 0, 5)]


class TestSpanStream:
    """The span stream covers the input exactly."""

    @pytest.mark.parametrize("source", [
        "",
        "   ",
        "http {\n  listen 80;\n}\n",
        'add_header X-Frame "SAMEORIGIN" always;',
        "location ~* \\.(js|css)$ { expires 30d; }",
        '"unterminated\n{ }',
        "\t}\r\n}}}{{{;;\x00\x7f",
        "server_name ñandú.example;",
        "$ ${ ${} -- - 1. .5",
    ])
    def test_spans_reconstruct_input(self, source):
        assert "".join(t.text for t in iter_spans(source)) == source

    def test_spans_are_contiguous_and_non_empty(self, sample_nginx_conf):
        position = 0
        for token in iter_spans(sample_nginx_conf):
            assert token.start == position
            assert token.end > token.start
            assert token.text == sample_nginx_conf[token.start:token.end]
            position = token.end
        assert position == len(sample_nginx_conf)

    def test_classified_tokens_skip_only_whitespace(self, sample_nginx_conf):
        spans = list(iter_spans(sample_nginx_conf))
        tokens = tokenize(sample_nginx_conf)
        assert tokens == [s for s in spans if not s.text.isspace()]
        assert all(not t.is_whitespace for t in tokens)

    def test_whitespace_span_is_plain(self):
        spans = list(iter_spans("a  b"))
        assert spans[1] == Token(TokenKind.PLAIN, "  ", 1, 3)


class TestTokenizerCursor:
    """Cursor behaviour of NginxTokenizer."""

    def test_next_token_returns_none_at_end(self):
        tokenizer = NginxTokenizer(";")
        assert tokenizer.next_token() == Token(TokenKind.PUNCTUATION, ";", 0, 1)
        assert tokenizer.next_token() is None
        assert tokenizer.at_end

    def test_empty_input_yields_nothing(self):
        assert list(NginxTokenizer("")) == []
        assert tokenize("") == []

    def test_reset_rescans_identically(self, sample_nginx_conf):
        tokenizer = NginxTokenizer(sample_nginx_conf)
        first = list(tokenizer)
        tokenizer.reset()
        assert list(tokenizer) == first

    def test_token_at_offset(self):
        assert token_at("listen 80;", 7) == Token(TokenKind.PLAIN, "80", 7, 9)
        assert token_at("listen 80;", 10) is None

    def test_starting_offset_is_clamped(self):
        assert NginxTokenizer("abc", pos=99).next_token() is None
        assert NginxTokenizer("abc", pos=-5).next_token().start == 0

    def test_iter_tokens_is_lazy(self):
        stream = iter_tokens("events {\n" * 1000)
        assert next(stream) == Token(TokenKind.KEYWORD, "events", 0, 6)
        assert next(stream).kind == TokenKind.BRACE


class TestTokenModel:
    """Token helpers."""

    def test_to_dict(self):
        token = Token(TokenKind.VARIABLE, "$host", 4, 9)
        assert token.to_dict() == {"kind": "variable", "text": "$host", "start": 4, "end": 9}
        assert token.length == 5

    def test_str(self):
        assert str(Token(TokenKind.BRACE, "{", 0, 1)) == "brace('{')@0:1"
