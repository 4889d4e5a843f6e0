"""Actions package - Side-effecting operations with explicit contracts.

Each action declares:
- read_only: Whether it modifies files
- requires_backup: Whether backup is mandatory
- rollback_support: Whether it can undo changes
- prerequisites: What must pass before action runs
"""

from nginx_editor.actions.format import ActionContract, FormatAction, FormatResult

__all__ = ["ActionContract", "FormatAction", "FormatResult"]
