"""Formatter profiles and layout options."""

from dataclasses import dataclass
from enum import StrEnum


class FormatProfile(StrEnum):
    """Named presets for layout options."""

    DEFAULT = "default"
    COMPACT = "compact"


class EndOfLine(StrEnum):
    LF = "lf"
    CRLF = "crlf"

    @property
    def newline(self) -> str:
        return "\r\n" if self is EndOfLine.CRLF else "\n"


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Layout settings handed to the document printer."""

    print_width: int = 80
    tab_width: int = 4
    end_of_line: EndOfLine = EndOfLine.LF

    def __post_init__(self):
        if self.print_width < 1:
            raise ValueError("print_width must be positive")
        if self.tab_width < 1:
            raise ValueError("tab_width must be positive")

    @staticmethod
    def for_profile(profile: FormatProfile) -> "FormatOptions":
        if profile == FormatProfile.COMPACT:
            return FormatOptions(print_width=60, tab_width=4)

        return FormatOptions()
