import json

import pytest
from rainbowjson._core.parsers.json_parse import ParseErrorKind
from rainbowjson._core.parsers.nodes import NodeType
from rainbowjson._core.parsers.tokens import TokenType
from rainbowjson.highlight.spans import HighlightSpan


def test_rich_enum_lookups():
    assert TokenType.from_str('bracketopen') is TokenType.BRACKET_OPEN
    assert TokenType.from_str('nope', default=TokenType.STRING) is TokenType.STRING
    assert TokenType.has_value('COLON')
    assert not TokenType.has_value(None)
    assert NodeType.values() == ['OBJECT', 'ARRAY', 'SCALAR']
    assert ParseErrorKind.values() == ['lexical', 'syntax', 'incomplete', 'internal']
    assert str(ParseErrorKind.SYNTAX) == 'syntax'


def test_rich_enum_lookup_errors():
    with pytest.raises(KeyError):
        NodeType.from_str('tuple')
    with pytest.raises(ValueError):
        NodeType.from_str(None)


def test_rich_base_model_helpers():
    span = HighlightSpan(line=3, start_column=2, end_column=8, token_type='rainbow5')
    assert span['token_type'] == 'rainbow5'
    assert span['missing'] is None
    assert span.to_dict()['end_column'] == 8
    assert json.loads(span.to_json()) == span.to_dict()
    assert repr(span).startswith('HighlightSpan({')


def test_rich_base_model_forbids_extra_fields():
    with pytest.raises(ValueError):
        HighlightSpan(line=0, start_column=0, end_column=1, token_type='t', extra=1)
