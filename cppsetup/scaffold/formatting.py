"""Fixed-width comment framing for generated files.

Every framed line is exactly `width` columns: a border character at column 1,
text, space fill, and a closing border at the last column.
"""
from dataclasses import dataclass, field
from datetime import datetime

LINE_WIDTH = 80
BORDER = "#"
SEPARATOR = "="

# Column where right-hand comments start in generated shell code
COMMENT_COLUMN = 53

TOOL_TAG = "@CPP_PROJECT_TOOL"
GENERATED_NOTICE = (
    "THIS FILE WAS PRODUCED BY THE C++ PROJECT SETUP TOOL.",
    "FEEL FREE TO EDIT THIS TO SUIT PROJECT NEEDS.",
)


@dataclass(frozen=True)
class FormattingContext:
    """Width, framing characters and timestamp shared by one generation run.

    Build it once (see `now`) right before rendering and pass the same
    instance to every renderer so both files carry the same date.
    """

    timestamp: datetime = field(default_factory=datetime.now)
    width: int = LINE_WIDTH
    border: str = BORDER
    separator: str = SEPARATOR

    @classmethod
    def now(cls) -> "FormattingContext":
        return cls(timestamp=datetime.now())

    @property
    def month_name(self) -> str:
        return self.timestamp.strftime("%B")

    @property
    def date_short(self) -> str:
        """e.g. 11/23"""
        return self.timestamp.strftime("%m/%d")

    @property
    def date_long(self) -> str:
        """e.g. 02 November 2022"""
        return self.timestamp.strftime("%d %B %Y")

    def fill(self, offset: int) -> str:
        """Spaces that carry a line holding `offset` characters to the closing border.

        `offset` counts every character already on the line except the
        closing border itself, so it must lie in [1, width - 1].
        """
        if not 1 <= offset <= self.width - 1:
            raise ValueError(f"Column offset {offset} outside 1..{self.width - 1}")
        return " " * (self.width - 1 - offset)

    def rule(self, length: int = None) -> str:
        """A run of border characters, full width by default."""
        return self.border * (self.width if length is None else length)

    def blank_line(self) -> str:
        return f"{self.border}{self.fill(1)}{self.border}"

    def section_break(self) -> str:
        return f"{self.border}{self.separator * (self.width - 2)}{self.border}"

    def framed(self, text: str, right: str = None) -> str:
        """Pad `text` and close it with `right` (a single border by default)."""
        right = self.border if right is None else right
        return f"{text}{self.fill(len(text) + len(right) - 1)}{right}"

    def date_line(self) -> str:
        """`# Date: DD Month YYYY` framed to full width.

        The fill depends on the month name, so it is recomputed per render:
        '# Date: ' (8) + day (2) + two spaces + year (4) = 16 + month.
        """
        text = f"{self.border} Date: {self.date_long}"
        return f"{text}{self.fill(16 + len(self.month_name))}{self.border}"


def annotate(code: str, comment: str = "", column: int = COMMENT_COLUMN) -> str:
    """Align a trailing `# comment` on `column` after a line of shell code."""
    if len(code) < column:
        code = code.ljust(column)
    else:
        code = f"{code} "
    return f"{code}{BORDER} {comment}" if comment else f"{code}{BORDER}"
