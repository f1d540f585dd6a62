from typing import List, Sequence, Tuple

from pydantic import model_validator

from rainbowjson._core.schema import RichBaseModel


class LineRange(RichBaseModel):
    """An inclusive range of document lines, with character offsets at both ends."""

    start_line: int
    start_column: int = 0
    end_line: int
    end_column: int = 0

    @model_validator(mode='after')
    def _check_order(self) -> 'LineRange':
        if self.start_line < 0 or self.end_line < self.start_line:
            raise ValueError(
                f'Invalid line range {self.start_line}..{self.end_line}'
            )
        return self


def extend_range_by_margin(
    visible_range: LineRange, margin: int, line_count: int
) -> LineRange:
    """Grow a range by ``margin`` lines on both sides, clamped to the document."""
    begin_line = max(0, visible_range.start_line - margin)
    end_line = max(begin_line, min(line_count - 1, visible_range.end_line + margin))
    return LineRange(
        start_line=begin_line,
        start_column=visible_range.start_column,
        end_line=end_line,
        end_column=visible_range.end_column,
    )


def slice_document(
    document_lines: Sequence[str], line_range: LineRange
) -> Tuple[List[str], List[int]]:
    """
    Cut the lines of ``line_range`` out of a document.

    Returns:
        The line texts and their zero based document line numbers.
    """
    begin_line = max(0, line_range.start_line)
    end_line = min(len(document_lines), line_range.end_line + 1)
    line_numbers = list(range(begin_line, end_line))
    return [document_lines[n] for n in line_numbers], line_numbers
