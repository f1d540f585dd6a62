from rainbowjson._core.parsers.json_parse import parse_json_objects
from rainbowjson.highlight.frequency import KeyPathStat, rank_key_paths
from rainbowjson.highlight.spans import (
    HighlightSpan,
    collect_highlight_spans,
    keys_to_highlight,
    match_highlight_index,
    reversed_signature,
)

LINE = '{"name": "x", "meta": {"name": 1}}'


def _records(lines):
    return parse_json_objects(lines, list(range(len(lines))))


def test_keys_are_leaf_first():
    stats = [
        KeyPathStat(path=['"a"'], count=2),
        KeyPathStat(path=['"a"', '"b"', '"c"'], count=1),
    ]
    assert keys_to_highlight(stats) == ['"a"', '"c"->"b"->"a"']
    assert reversed_signature(['"x"', '"y"']) == '"y"->"x"'


def test_truncated_path_matches_full_key():
    keys = ['"id"', '"c"->"b"->"a"']
    assert match_highlight_index(keys, ['"b"', '"c"']) == 1
    assert match_highlight_index(keys, ['"id"']) == 0
    assert match_highlight_index(keys, ['"missing"']) is None


def test_quoted_keys_do_not_match_longer_names():
    assert match_highlight_index(['"names"'], ['"name"']) is None


def test_spans_cover_keys_only():
    records = _records([LINE])
    keys = keys_to_highlight(rank_key_paths(records))
    assert keys == ['"name"', '"meta"', '"name"->"meta"']

    spans = collect_highlight_spans(records, keys)
    assert spans == [
        HighlightSpan(line=0, start_column=1, end_column=7, token_type='rainbow2'),
        HighlightSpan(line=0, start_column=14, end_column=20, token_type='rainbow3'),
        HighlightSpan(line=0, start_column=23, end_column=29, token_type='rainbow4'),
    ]


def test_token_types_cycle():
    records = _records([LINE])
    keys = ['"name"', '"meta"', '"name"->"meta"']
    spans = collect_highlight_spans(records, keys, token_types=['even', 'odd'])
    assert [s.token_type for s in spans] == ['even', 'odd', 'even']


def test_keys_outside_the_list_are_skipped():
    records = _records(['{"id": 1, "skip": [{"id": 2}]}'])
    spans = collect_highlight_spans(records, ['"id"'])
    # the nested "id" has path skip -> id, which is not a prefix of '"id"'
    assert len(spans) == 1
    assert spans[0].start_column == 1


def test_no_keys_no_spans():
    assert collect_highlight_spans(_records([LINE]), []) == []


def test_records_spanning_lines():
    records = _records(['[', '  {', '    "k": true', '  }', ']'])
    spans = collect_highlight_spans(records, ['"k"'])
    assert spans == [
        HighlightSpan(line=2, start_column=4, end_column=7, token_type='rainbow2')
    ]


def test_deeply_nested_record():
    depth = 1500
    records = _records(['{"a": ' * depth + '1' + '}' * depth])
    keys = ['"a"', '"a"->"a"', '"a"->"a"->"a"']
    spans = collect_highlight_spans(records, keys)
    # deeper paths have longer signatures than every key
    assert [(s.start_column, s.token_type) for s in spans] == [
        (1, 'rainbow2'),
        (7, 'rainbow3'),
        (13, 'rainbow4'),
    ]
