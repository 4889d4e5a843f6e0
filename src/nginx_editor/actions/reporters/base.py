"""Base Reporter Interface."""

from abc import ABC, abstractmethod

from rich.console import Console

from nginx_editor.model.token import Token


class BaseReporter(ABC):
    """Abstract base class for all token reporters."""

    def __init__(self, console: Console) -> None:
        self.console = console

    @abstractmethod
    def report_tokens(self, tokens: list[Token], source_name: str = "<stdin>") -> None:
        """Report a token listing to the console."""
        pass
