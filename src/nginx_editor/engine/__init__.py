"""Engine package - Formatting and highlighting built on the tokenizer."""

from nginx_editor.engine.formatter import NginxFormatter, format_config
from nginx_editor.engine.highlight import Highlighter

__all__ = ["Highlighter", "NginxFormatter", "format_config"]
