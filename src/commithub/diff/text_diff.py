"""Line-level text diff.

Splits both texts on "\\n" (keeping line endings) and groups the
``difflib.SequenceMatcher`` opcodes into equal/removed/added segments.
"""

import difflib
import re
from typing import Any, Dict, List

_LINE_END = re.compile(r"(?<=\n)")

EQUAL = "equal"
ADDED = "added"
REMOVED = "removed"


class DiffSegment:
    """A run of consecutive lines sharing one classification.

    Attributes:
        kind: "equal", "added" or "removed"
        text: The lines, joined, with their line endings
    """

    def __init__(self, kind: str, text: str):
        self.kind = kind
        self.text = text

    def __repr__(self) -> str:
        return f"DiffSegment({self.kind}: {self.text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiffSegment):
            return NotImplemented
        return self.kind == other.kind and self.text == other.text

    @property
    def line_count(self) -> int:
        return len(split_lines(self.text))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {"kind": self.kind, "text": self.text}


def split_lines(text: str) -> List[str]:
    """Split on "\\n" only, keeping line endings."""
    return [line for line in _LINE_END.split(text) if line]


def diff_lines(old_text: str, new_text: str) -> List[DiffSegment]:
    """Compute line segments turning ``old_text`` into ``new_text``.

    A replaced block is reported as its removed lines followed by its added
    lines.

    Example:
        >>> diff_lines("X\\n", "X\\nY\\n")
        [DiffSegment(equal: 'X\\n'), DiffSegment(added: 'Y\\n')]
    """
    old_lines = split_lines(old_text)
    new_lines = split_lines(new_text)

    matcher = difflib.SequenceMatcher(None, old_lines, new_lines, autojunk=False)
    segments: List[DiffSegment] = []

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            segments.append(DiffSegment(EQUAL, "".join(old_lines[i1:i2])))
            continue
        if tag in ("delete", "replace"):
            segments.append(DiffSegment(REMOVED, "".join(old_lines[i1:i2])))
        if tag in ("insert", "replace"):
            segments.append(DiffSegment(ADDED, "".join(new_lines[j1:j2])))

    return segments
