"""Rich Reporter Implementation."""

from collections import Counter

from rich.console import Console
from rich.table import Table
from rich.text import Text

from nginx_editor.actions.reporters.base import BaseReporter
from nginx_editor.engine.highlight import Highlighter
from nginx_editor.model.token import Token


class RichReporter(BaseReporter):
    """Generates a coloured token table using Rich."""

    def __init__(self, console: Console, highlighter: Highlighter | None = None) -> None:
        super().__init__(console)
        self.highlighter = highlighter or Highlighter()

    def report_tokens(self, tokens: list[Token], source_name: str = "<stdin>") -> None:
        table = Table(title=f"Tokens: {source_name}", title_justify="left")
        table.add_column("Span", justify="right", style="dim")
        table.add_column("Kind")
        table.add_column("Text", overflow="fold")

        for token in tokens:
            style = self.highlighter.style_for(token.kind)
            table.add_row(
                f"{token.start}-{token.end}",
                Text(token.kind.value, style=style),
                Text(repr(token.text), style=style),
            )

        self.console.print(table)

        counts = Counter(t.kind.value for t in tokens)
        summary = ", ".join(f"{n} {kind}" for kind, n in sorted(counts.items()))
        self.console.print(f"   [dim]Summary:[/] {len(tokens)} tokens ({summary or 'none'})")
