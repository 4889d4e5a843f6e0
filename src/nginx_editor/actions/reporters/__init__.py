"""Token reporters: rich table, plain lines, or JSON."""

from nginx_editor.actions.reporters.base import BaseReporter
from nginx_editor.actions.reporters.json_reporter import JsonReporter
from nginx_editor.actions.reporters.plain_reporter import PlainReporter
from nginx_editor.actions.reporters.rich_reporter import RichReporter

REPORTERS: dict[str, type[BaseReporter]] = {
    "rich": RichReporter,
    "plain": PlainReporter,
    "json": JsonReporter,
}

__all__ = ["BaseReporter", "JsonReporter", "PlainReporter", "REPORTERS", "RichReporter"]
