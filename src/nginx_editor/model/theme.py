"""Editor themes - Display colours for each token kind.

Themes are pure data. Each one carries a dark and a light palette; braces and
semicolons share the ``operator`` colour and plain text is left uncoloured.
"""

from dataclasses import asdict, dataclass
from enum import Enum

from nginx_editor.errors import UnknownThemeError
from nginx_editor.model.token import TokenKind


class ColorMode(Enum):
    """Which palette of a theme to use."""

    DARK = "dark"
    LIGHT = "light"


@dataclass(frozen=True)
class EditorThemeColors:
    """Palette for one colour mode."""

    keyword: str  # Block markers: http, server, location
    directive: str  # Nginx directives
    string: str
    comment: str
    variable: str  # $var
    number: str
    operator: str  # Braces, semicolons

    def color_for(self, kind: TokenKind) -> str | None:
        """Return the colour for ``kind``, or None for uncoloured text."""
        if kind in (TokenKind.BRACE, TokenKind.PUNCTUATION):
            return self.operator
        if kind == TokenKind.PLAIN:
            return None
        return getattr(self, kind.value)


@dataclass(frozen=True)
class EditorTheme:
    """A named pair of palettes."""

    id: str
    name: str
    description: str
    dark: EditorThemeColors
    light: EditorThemeColors

    def colors(self, mode: ColorMode = ColorMode.DARK) -> EditorThemeColors:
        return self.dark if mode == ColorMode.DARK else self.light

    def to_dict(self) -> dict:
        return asdict(self)


NORD = EditorTheme(
    id="nord",
    name="Nord",
    description="Arctic, north-bluish palette",
    dark=EditorThemeColors(
        keyword="#81a1c1", directive="#88c0d0", string="#a3be8c", comment="#616e88",
        variable="#8fbcbb", number="#b48ead", operator="#81a1c1",
    ),
    light=EditorThemeColors(
        keyword="#3b526d", directive="#356780", string="#5d7a52", comment="#616e88",
        variable="#2e5c5a", number="#765c7d", operator="#3b526d",
    ),
)

DRACULA = EditorTheme(
    id="dracula",
    name="Dracula",
    description="High-contrast dark theme",
    dark=EditorThemeColors(
        keyword="#ff79c6", directive="#50fa7b", string="#f1fa8c", comment="#6272a4",
        variable="#8be9fd", number="#bd93f9", operator="#ff79c6",
    ),
    light=EditorThemeColors(
        keyword="#d63384", directive="#22863a", string="#b08800", comment="#6a737d",
        variable="#005cc5", number="#6f42c1", operator="#d63384",
    ),
)

GITHUB = EditorTheme(
    id="github",
    name="GitHub",
    description="Clean GitHub style",
    dark=EditorThemeColors(
        keyword="#ff7b72", directive="#79c0ff", string="#a5d6ff", comment="#8b949e",
        variable="#ffa657", number="#79c0ff", operator="#ff7b72",
    ),
    light=EditorThemeColors(
        keyword="#d73a49", directive="#0366d6", string="#032f62", comment="#6a737d",
        variable="#e36209", number="#005cc5", operator="#d73a49",
    ),
)

MONOKAI = EditorTheme(
    id="monokai",
    name="Monokai",
    description="Vivid classic Monokai",
    dark=EditorThemeColors(
        keyword="#f92672", directive="#a6e22e", string="#e6db74", comment="#75715e",
        variable="#66d9ef", number="#ae81ff", operator="#f92672",
    ),
    light=EditorThemeColors(
        keyword="#a71d5d", directive="#3e999f", string="#977800", comment="#75715e",
        variable="#21889b", number="#8959a8", operator="#a71d5d",
    ),
)

ONE_DARK = EditorTheme(
    id="one-dark",
    name="One Dark",
    description="Atom One Dark",
    dark=EditorThemeColors(
        keyword="#c678dd", directive="#61afef", string="#98c379", comment="#5c6370",
        variable="#e06c75", number="#d19a66", operator="#56b6c2",
    ),
    light=EditorThemeColors(
        keyword="#a626a4", directive="#4078f2", string="#50a14f", comment="#a0a1a7",
        variable="#e45649", number="#986801", operator="#0084bc",
    ),
)

SOLARIZED = EditorTheme(
    id="solarized",
    name="Solarized",
    description="Solarized precision colours",
    dark=EditorThemeColors(
        keyword="#6c71c4", directive="#2aa198", string="#859900", comment="#586e75",
        variable="#b58900", number="#d33682", operator="#6c71c4",
    ),
    light=EditorThemeColors(
        keyword="#268bd2", directive="#2aa198", string="#859900", comment="#93a1a1",
        variable="#b58900", number="#d33682", operator="#268bd2",
    ),
)

VSCODE = EditorTheme(
    id="vscode",
    name="VSCode Dark+",
    description="VSCode default dark theme",
    dark=EditorThemeColors(
        keyword="#569cd6", directive="#9cdcfe", string="#ce9178", comment="#6a9955",
        variable="#4fc1ff", number="#b5cea8", operator="#d4d4d4",
    ),
    light=EditorThemeColors(
        keyword="#0000ff", directive="#001080", string="#a31515", comment="#008000",
        variable="#098658", number="#098658", operator="#000000",
    ),
)

EDITOR_THEMES: tuple[EditorTheme, ...] = (
    NORD, DRACULA, GITHUB, MONOKAI, ONE_DARK, SOLARIZED, VSCODE,
)

DEFAULT_THEME = NORD


def require_editor_theme(theme_id: str) -> EditorTheme:
    """Look up a theme by id, raising UnknownThemeError if it is missing."""
    for theme in EDITOR_THEMES:
        if theme.id == theme_id:
            return theme
    raise UnknownThemeError(theme_id)


def get_editor_theme(theme_id: str | None) -> EditorTheme:
    """Look up a theme by id, falling back to the default theme."""
    if not theme_id:
        return DEFAULT_THEME
    try:
        return require_editor_theme(theme_id)
    except UnknownThemeError:
        return DEFAULT_THEME


def theme_ids() -> list[str]:
    return [theme.id for theme in EDITOR_THEMES]
