"""Format Action - Re-indent configuration files.

CONTRACT:
- read_only: False (rewrites files unless check=True)
- requires_backup: False
- rollback_support: N/A
- prerequisites: None
"""

import difflib
import logging
from dataclasses import dataclass
from pathlib import Path

from nginx_editor.engine.formatter import NginxFormatter

logger = logging.getLogger(__name__)


@dataclass
class ActionContract:
    """Explicit contract for an action."""

    read_only: bool
    requires_backup: bool
    rollback_support: bool
    prerequisites: list[str]


@dataclass
class FormatResult:
    """Result of formatting one document."""

    path: str
    original: str = ""
    formatted: str = ""
    written: bool = False
    error: str | None = None

    @property
    def changed(self) -> bool:
        return self.error is None and self.original != self.formatted

    @property
    def success(self) -> bool:
        return self.error is None

    def diff(self) -> str:
        """Unified diff from the original to the formatted text."""
        if not self.changed:
            return ""
        return "".join(
            difflib.unified_diff(
                self.original.splitlines(keepends=True),
                self.formatted.splitlines(keepends=True),
                fromfile=f"{self.path} (original)",
                tofile=f"{self.path} (formatted)",
            )
        )


class FormatAction:
    """Format configuration text and files.

    In check mode nothing is written; callers use ``FormatResult.changed``
    to decide the exit status.
    """

    CONTRACT = ActionContract(
        read_only=False,
        requires_backup=False,
        rollback_support=False,
        prerequisites=[],
    )

    def __init__(self, formatter: NginxFormatter | None = None) -> None:
        self.formatter = formatter or NginxFormatter()

    def format_text(self, content: str, name: str = "<stdin>") -> FormatResult:
        """Format in-memory text."""
        return FormatResult(path=name, original=content, formatted=self.formatter.format(content))

    def format_file(self, path: str | Path, *, check: bool = False) -> FormatResult:
        """Format a file, rewriting it in place unless ``check`` is set.

        Args:
            path: File to format.
            check: If True, only compute the result, don't write.

        Returns:
            FormatResult; read/write failures are reported in ``error``.
        """
        path = Path(path)
        result = FormatResult(path=str(path))

        try:
            # newline="" keeps \r so the comparison sees line-ending changes
            with open(path, "r", encoding="utf-8", newline="") as f:
                result.original = f.read()
        except (OSError, UnicodeDecodeError) as e:
            result.error = f"Failed to read {path}: {e}"
            logger.warning(result.error)
            return result

        result.formatted = self.formatter.format(result.original)

        if check or not result.changed:
            return result

        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(result.formatted)
            result.written = True
            logger.info("Formatted %s", path)
        except OSError as e:
            result.error = f"Failed to write {path}: {e}"
            logger.warning(result.error)

        return result

    def format_files(self, paths: list[str | Path], *, check: bool = False) -> list[FormatResult]:
        return [self.format_file(p, check=check) for p in paths]
