"""
Idempotent patching of the trailing stamp line of a README.
"""

from typing import List

from .stamp import MARKER_PREFIX


def apply_stamp(text: str, label: str, prefix: str = MARKER_PREFIX) -> str:
    """
    Make ``label`` the last non-blank line of ``text``.

    If the last non-blank line already starts with ``prefix`` it is replaced
    in place; otherwise ``label`` is appended after every existing line,
    trailing blank lines included. Other lines are never touched. The result
    uses ``\\n`` line endings and ends with exactly one newline.
    """
    if not text:
        return label + "\n"

    normalized = text.replace("\r\n", "\n")
    if normalized.endswith("\n"):
        # the final newline terminates the last line
        normalized = normalized[:-1]
    lines: List[str] = normalized.split("\n")

    last = len(lines) - 1
    while last >= 0 and lines[last].strip() == "":
        last -= 1

    if last >= 0 and lines[last].startswith(prefix):
        lines[last] = label
    else:
        lines.append(label)

    return "\n".join(lines) + "\n"
