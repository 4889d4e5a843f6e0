"""Structural formatter - Re-indents nginx configuration by brace depth.

The formatter is line-oriented: it counts raw ``{`` and ``}`` characters on
each trimmed line and carries only the indentation depth from one line to the
next. Braces inside quoted strings or comments are counted like any other
brace, so a line such as ``return 200 "{";`` shifts the indentation of the
lines after it. This matches the editor's long-standing behaviour; callers
that need string-aware formatting must not rely on this module.
"""

import re


class NginxFormatter:
    """Re-indent a configuration document.

    Rules:
    1. Lines are trimmed; runs of blank lines collapse to one, and blank
       lines at the start and end of the document are dropped.
    2. A line that closes a block is rendered one level shallower than the
       content it closes.
    3. Whitespace around ``{`` becomes a single leading space; whitespace
       around ``}`` is removed.
    4. Depth never goes below zero.
    """

    INDENT = "  "

    OPEN_BRACE_RE = re.compile(r"\s*\{\s*")
    CLOSE_BRACE_RE = re.compile(r"\s*\}\s*")
    # Example: location /api{  ->  location /api {
    GLUED_BRACE_RE = re.compile(r"(\S)\{")

    def __init__(self, indent: str | None = None) -> None:
        self.indent = indent if indent is not None else self.INDENT

    def format(self, content: str) -> str:
        """Format ``content`` and return the new document text.

        Args:
            content: Full configuration text.

        Returns:
            The re-indented document, always ending with exactly one newline.
        """
        result: list[str] = []
        depth = 0

        for raw_line in content.split("\n"):
            line = raw_line.strip()

            if not line:
                if result and result[-1] != "":
                    result.append("")
                continue

            opens = line.count("{")
            closes = line.count("}")

            if closes and not opens:
                depth = max(0, depth - 1)
            elif closes and opens and line.index("}") < line.index("{"):
                # "} else {" style fragment
                depth = max(0, depth - 1)

            result.append(self.indent * depth + self.normalize_line(line))

            if opens:
                depth = max(0, depth + opens - closes)

        while result and result[-1] == "":
            result.pop()

        return "\n".join(result) + "\n"

    def normalize_line(self, line: str) -> str:
        """Normalize the spacing around braces on one trimmed line."""
        line = self.OPEN_BRACE_RE.sub(" {", line)
        line = self.CLOSE_BRACE_RE.sub("}", line)
        return self.GLUED_BRACE_RE.sub(r"\1 {", line)

    def is_formatted(self, content: str) -> bool:
        """True if formatting ``content`` would not change it."""
        return self.format(content) == content


def format_config(content: str) -> str:
    """Convenience function to format a configuration string."""
    return NginxFormatter().format(content)
