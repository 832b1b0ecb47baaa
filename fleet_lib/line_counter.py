"""
Line Counter Module - Rough source line statistics for C-style files
"""

from typing import NamedTuple


class LineCounts(NamedTuple):
    physical: int
    logical: int
    comments: int

    def report(self) -> str:
        return "\n".join([
            "=== Code Analysis ===",
            f"Physical lines: {self.physical}",
            f"Logical lines: {self.logical}",
            f"Comments: {self.comments}",
        ])


class CodeLineCounter:
    """Counts physical, logical and comment lines with a text heuristic.

    Blank lines are ignored. A line starting with a comment prefix is a
    comment; otherwise it is logical when it contains one of the logical
    markers. Lines matching neither still count as physical.
    """

    COMMENT_PREFIXES = ('//', '/*', '*')
    LOGICAL_MARKERS = (';', 'class', 'return')

    @classmethod
    def count_lines(cls, lines) -> LineCounts:
        physical = logical = comments = 0
        for line in lines:
            trimmed = line.rstrip('\n').lstrip(' \t')
            if not trimmed:
                continue

            physical += 1

            if trimmed.startswith(cls.COMMENT_PREFIXES):
                comments += 1
            elif any(marker in trimmed for marker in cls.LOGICAL_MARKERS):
                logical += 1

        return LineCounts(physical, logical, comments)

    @classmethod
    def analyze(cls, filename: str) -> LineCounts:
        """Analyze a file; raises FileNotFoundError if it does not exist"""
        with open(filename, encoding='utf-8', errors='replace') as f:
            return cls.count_lines(f)
