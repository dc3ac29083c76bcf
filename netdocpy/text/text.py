from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Offset into (or length of) document text, in characters."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    @staticmethod
    def of(text: str) -> "TextSize":
        return TextSize(len(text))

    @staticmethod
    def from_int(value: int) -> "TextSize":
        return TextSize(value)

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """Half-open range [start, end) over document text.

    Invariant: 0 <= start <= end.
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def new(start: TextSize, end: TextSize) -> "TextRange":
        return TextRange(start.value, end.value)

    @staticmethod
    def empty(offset: TextSize) -> "TextRange":
        return TextRange(offset.value, offset.value)

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        return TextSize(self._end)

    def len(self) -> TextSize:
        return TextSize(self._end - self._start)

    def is_empty(self) -> bool:
        return self._start == self._end

    def as_tuple(self) -> tuple[int, int]:
        return (self._start, self._end)

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def slice_text_range(source: str, range: TextRange) -> str:
    return source[range.start.value : range.end.value]


class LineIndex:
    """Maps character offsets to 1-based (line, column) pairs.

    Only `\\n` starts a new line, matching the document grammar.
    """

    __slots__ = ("_line_starts", "_len")

    def __init__(self, source: str) -> None:
        starts = [0]
        index = source.find("\n")
        while index != -1:
            starts.append(index + 1)
            index = source.find("\n", index + 1)
        self._line_starts = starts
        self._len = len(source)

    def line_col(self, offset: TextSize) -> tuple[int, int]:
        position = min(offset.value, self._len)
        line = bisect_right(self._line_starts, position) - 1
        return line + 1, position - self._line_starts[line] + 1

    def line_range(self, line: int) -> TextRange:
        """Range of a 1-based line, excluding its newline."""
        if line < 1 or line > len(self._line_starts):
            raise ValueError(f"Line {line} out of range")
        start = self._line_starts[line - 1]
        if line < len(self._line_starts):
            end = self._line_starts[line] - 1
        else:
            end = self._len
        return TextRange(start, end)
