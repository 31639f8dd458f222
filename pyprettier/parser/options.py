"""Parser configuration options."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Options forwarded to CPython's `ast.parse`."""

    feature_version: tuple[int, int] | None = None
    filename: str = "<unknown>"

    def __post_init__(self):
        if self.feature_version is not None and self.feature_version[0] != 3:
            raise ValueError("feature_version must target Python 3")
