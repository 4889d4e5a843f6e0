"""Model package - Core data structures for nginx-editor."""

from nginx_editor.model.theme import (
    DEFAULT_THEME,
    EDITOR_THEMES,
    ColorMode,
    EditorTheme,
    EditorThemeColors,
    get_editor_theme,
    require_editor_theme,
    theme_ids,
)
from nginx_editor.model.token import Token, TokenKind

__all__ = [
    "ColorMode",
    "DEFAULT_THEME",
    "EDITOR_THEMES",
    "EditorTheme",
    "EditorThemeColors",
    "Token",
    "TokenKind",
    "get_editor_theme",
    "require_editor_theme",
    "theme_ids",
]
