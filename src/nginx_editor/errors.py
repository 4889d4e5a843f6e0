"""Exception types raised by the side-effecting layers.

The tokenizer and formatter never raise; these cover themes and settings.
"""


class NginxEditorError(Exception):
    """Base class for nginx-editor errors."""


class UnknownThemeError(NginxEditorError, KeyError):
    """Raised when a theme id is not in the registry."""

    def __init__(self, theme_id: str) -> None:
        self.theme_id = theme_id
        super().__init__(theme_id)

    def __str__(self) -> str:
        return f"Unknown editor theme: {self.theme_id!r}"


class SettingsError(NginxEditorError):
    """Raised when a settings value is invalid."""
