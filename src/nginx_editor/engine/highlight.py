"""Highlighter - Renders the token stream as styled Rich text."""

from rich.style import Style
from rich.text import Text

from nginx_editor.model.theme import ColorMode, EditorTheme, get_editor_theme
from nginx_editor.model.token import TokenKind
from nginx_editor.parser.tokenizer import iter_spans


class Highlighter:
    """Maps token kinds to Rich styles using an editor theme."""

    def __init__(self, theme: EditorTheme | None = None, mode: ColorMode = ColorMode.DARK) -> None:
        self.theme = theme or get_editor_theme(None)
        self.mode = mode
        self._styles = self._build_styles()

    def _build_styles(self) -> dict[TokenKind, Style]:
        colors = self.theme.colors(self.mode)
        styles: dict[TokenKind, Style] = {}
        for kind in TokenKind:
            color = colors.color_for(kind)
            if color is None:
                styles[kind] = Style.null()
            elif kind == TokenKind.COMMENT:
                styles[kind] = Style(color=color, italic=True)
            elif kind == TokenKind.KEYWORD:
                styles[kind] = Style(color=color, bold=True)
            else:
                styles[kind] = Style(color=color)
        return styles

    def style_for(self, kind: TokenKind) -> Style:
        return self._styles[kind]

    def highlight(self, content: str) -> Text:
        """Return ``content`` as a Text with one styled span per token."""
        text = Text(end="")
        for token in iter_spans(content):
            text.append(token.text, style=self._styles[token.kind])
        return text
