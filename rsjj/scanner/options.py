"""Scanner configuration options."""

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class ScannerOptions:
    """Knobs controlling line numbering and string handling."""

    first_line: int = 1
    allow_multiline_strings: bool = True

    def __post_init__(self):
        if self.first_line < 0:
            raise ValueError("first_line cannot be negative")

    def with_first_line(self, line: int) -> "ScannerOptions":
        return replace(self, first_line=line)
