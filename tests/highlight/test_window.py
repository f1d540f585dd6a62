import pytest
from pydantic import ValidationError
from rainbowjson.highlight.window import LineRange, extend_range_by_margin, slice_document


@pytest.mark.parametrize(
    'start, end, margin, line_count, expected',
    [
        (10, 20, 5, 100, (5, 25)),
        (2, 3, 5, 6, (0, 5)),
        (0, 0, 0, 1, (0, 0)),
        (50, 60, 100, 70, (0, 69)),
        (0, 0, 3, 0, (0, 0)),
    ],
)
def test_extend_range_by_margin(start, end, margin, line_count, expected):
    extended = extend_range_by_margin(
        LineRange(start_line=start, end_line=end), margin, line_count
    )
    assert (extended.start_line, extended.end_line) == expected


def test_extend_keeps_columns():
    visible = LineRange(start_line=4, start_column=3, end_line=8, end_column=7)
    extended = extend_range_by_margin(visible, 1, 20)
    assert extended.start_column == 3
    assert extended.end_column == 7


@pytest.mark.parametrize('start, end', [(-1, 3), (5, 4)])
def test_invalid_line_range(start, end):
    with pytest.raises(ValidationError):
        LineRange(start_line=start, end_line=end)


def test_line_range_is_frozen():
    line_range = LineRange(start_line=0, end_line=1)
    with pytest.raises(ValidationError):
        line_range.start_line = 1


def test_slice_document():
    lines, numbers = slice_document(['a', 'b', 'c'], LineRange(start_line=1, end_line=5))
    assert lines == ['b', 'c']
    assert numbers == [1, 2]


def test_slice_whole_document():
    document = ['{', '"k": 1', '}']
    lines, numbers = slice_document(document, LineRange(start_line=0, end_line=2))
    assert lines == document
    assert numbers == [0, 1, 2]
