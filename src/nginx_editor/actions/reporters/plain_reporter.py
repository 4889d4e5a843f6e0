"""Plain Text Reporter Implementation."""

from nginx_editor.actions.reporters.base import BaseReporter
from nginx_editor.model.token import Token


class PlainReporter(BaseReporter):
    """Generates clean, text-only output: one token per line."""

    def report_tokens(self, tokens: list[Token], source_name: str = "<stdin>") -> None:
        for token in tokens:
            self.console.print(
                f"{token.start}:{token.end} {token.kind.value} {token.text!r}",
                markup=False,
                emoji=False,
                highlight=False,
                soft_wrap=True,
            )
