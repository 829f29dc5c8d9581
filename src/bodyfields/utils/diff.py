# topmark:header:start
#
#   project      : BodyFields
#   file         : diff.py
#   file_relpath : src/bodyfields/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diffs of document bodies.

Blocks use ``\\r\\n`` after their markers while user text usually does not;
the rendered preview therefore shows line-break characters explicitly.
"""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Sequence


def unified_body_diff(old: str, new: str, *, label: str = "body") -> str:
    """Return a unified diff between two document bodies ("" when equal).

    Args:
        old (str): Body before the update.
        new (str): Body after the update.
        label (str): Name shown in the ``---``/``+++`` lines.

    Returns:
        str: The diff text, one line per entry, line breaks preserved.
    """
    if old == new:
        return ""
    lines = difflib.unified_diff(
        old.splitlines(keepends=True),
        new.splitlines(keepends=True),
        fromfile=f"{label} (current)",
        tofile=f"{label} (updated)",
    )
    return "".join(line if line.endswith("\n") else line + "\n" for line in lines)


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch (Sequence[str] | str): A unified diff as lines or as one multiline string.
        show_line_numbers (bool): Whether to prefix output with line numbers.

    Returns:
        str: The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=True)
    else:
        lines = list(patch)

    def process_line(line: str) -> str:
        content = line.replace("\r", "\\r").replace("\n", "\\n")
        if not line:
            return content
        match line[0]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.white(content)

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)
