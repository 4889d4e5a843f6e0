"""
Theme API routes.

Endpoints:
- GET /api/themes - List editor themes
- GET /api/themes/{theme_id} - Get one editor theme
"""

from pydantic import BaseModel

from fastapi import APIRouter, HTTPException

from nginx_editor.errors import UnknownThemeError
from nginx_editor.model.theme import EDITOR_THEMES, EditorTheme, require_editor_theme

router = APIRouter()


class ThemeColors(BaseModel):
    """Palette for one colour mode."""
    keyword: str
    directive: str
    string: str
    comment: str
    variable: str
    number: str
    operator: str


class ThemeModel(BaseModel):
    """Editor theme."""
    id: str
    name: str
    description: str
    dark: ThemeColors
    light: ThemeColors


def _to_model(theme: EditorTheme) -> ThemeModel:
    return ThemeModel(**theme.to_dict())


@router.get("/themes", response_model=list[ThemeModel])
async def list_themes() -> list[ThemeModel]:
    """List all editor themes, default first."""
    return [_to_model(theme) for theme in EDITOR_THEMES]


@router.get("/themes/{theme_id}", response_model=ThemeModel)
async def get_theme(theme_id: str) -> ThemeModel:
    """Get a single editor theme."""
    try:
        return _to_model(require_editor_theme(theme_id))
    except UnknownThemeError as e:
        raise HTTPException(status_code=404, detail=str(e))
