"""JSON Reporter Implementation."""

import json

from nginx_editor.actions.reporters.base import BaseReporter
from nginx_editor.model.token import Token


class JsonReporter(BaseReporter):
    """Generates machine-readable JSON output."""

    def report_tokens(self, tokens: list[Token], source_name: str = "<stdin>") -> None:
        data = {
            "source": source_name,
            "tokens": [t.to_dict() for t in tokens],
        }
        # print_json would re-highlight the payload; keep it byte-exact
        self.console.print(json.dumps(data, indent=2), markup=False, emoji=False, highlight=False, soft_wrap=True)
