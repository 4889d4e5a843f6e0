"""Web package - Local HTTP API for the browser editor."""

from nginx_editor.web.app import create_app, run_server

__all__ = ["create_app", "run_server"]
