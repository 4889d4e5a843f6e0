"""nginx-editor: tokenizer, formatter and highlighter for nginx configuration files."""

__version__ = "0.1.0"
