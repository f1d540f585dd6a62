import pytest
from rainbowjson._core.error import JsonIncompleteError, JsonSyntaxError
from rainbowjson._core.parsers.automaton import (
    STATE_TRANSITIONS,
    ParserState,
    consume_record,
    describe_expectation,
)
from rainbowjson._core.parsers.nodes import NodeType, Position
from rainbowjson._core.parsers.tokenizer import tokenize_line, tokenize_lines


def _consume(text, start_index=0):
    return consume_record(tokenize_line(text, 1), start_index)


class TestConsumeRecord:
    def test_empty_object(self):
        node, next_index = _consume('{}')
        assert node.node_type == NodeType.OBJECT
        assert node.children == []
        assert node.start_position == Position(1, 0)
        assert node.end_position == Position(1, 1)
        assert next_index == 2

    def test_empty_array(self):
        node, _ = _consume('[]')
        assert node.node_type == NodeType.ARRAY
        assert node.children == []

    def test_object_scalars_carry_key_and_positions(self):
        node, next_index = _consume('{"name": "John", "age": 30}')
        assert next_index == 9
        name, age = node.children
        assert name.node_type == NodeType.SCALAR
        assert name.parent_key == '"name"'
        assert name.parent_key_position == Position(1, 1)
        assert name.parent_array_index is None
        assert name.value == '"John"'
        assert name.start_position == Position(1, 9)
        assert name.end_position == Position(1, 15)
        assert age.parent_key == '"age"'
        assert age.value == '30'

    def test_array_elements_carry_index(self):
        node, _ = _consume('[1, "two", null]')
        assert [c.parent_array_index for c in node.children] == [0, 1, 2]
        assert all(c.parent_key is None for c in node.children)
        assert all(c.parent_key_position is None for c in node.children)

    def test_nested_containers(self):
        node, _ = _consume('{"tags": ["red", "blue"], "meta": {"n": [[]]}}')
        tags, meta = node.children
        assert tags.node_type == NodeType.ARRAY
        assert tags.parent_key == '"tags"'
        assert [c.value for c in tags.children] == ['"red"', '"blue"']
        assert meta.node_type == NodeType.OBJECT
        inner = meta.children[0]
        assert inner.node_type == NodeType.ARRAY
        assert inner.children[0].node_type == NodeType.ARRAY
        assert inner.children[0].parent_array_index == 0
        assert inner.children[0].end_position is not None

    def test_array_of_objects(self):
        node, _ = _consume('[{"id": 1}, {}]')
        assert [c.node_type for c in node.children] == [NodeType.OBJECT] * 2
        assert node.children[1].parent_array_index == 1
        assert node.children[0].children[0].parent_key == '"id"'

    def test_stops_after_record(self):
        tokens = tokenize_line('{"a": 1} [2]', 1)
        node, next_index = consume_record(tokens, 0)
        assert next_index == 5
        second, end = consume_record(tokens, next_index)
        assert second.node_type == NodeType.ARRAY
        assert end == len(tokens)

    def test_multiline_positions(self):
        tokens = tokenize_lines(['{', '  "k": [', '    true', '  ]', '}'], [5, 6, 7, 8, 9])
        node, _ = consume_record(tokens, 0)
        child = node.children[0]
        assert child.parent_key_position == Position(6, 2)
        assert child.start_position == Position(6, 7)
        assert child.end_position == Position(8, 2)
        assert child.children[0].start_position == Position(7, 4)
        assert child.children[0].end_position == Position(7, 8)
        assert node.end_position == Position(9, 0)

    def test_descendants_have_no_relative_depth(self):
        node, _ = _consume('{"a": {"b": 1}}')
        assert all(n.relative_depth is None for n in node.iter_nodes())


class TestConsumeRecordErrors:
    @pytest.mark.parametrize(
        'text, column, message',
        [
            ('{"key" "value"}', 7, "Expected ':'"),
            ('{"a": 1 "b": 2}', 8, "Expected ',' or '}'"),
            ('[1 2 3]', 3, "Expected ',' or ']'"),
            ('{"key": "value",}', 16, 'Expected string key'),
            ('[1, ]', 4, 'Expected value'),
            ('{1: 2}', 1, "Expected string key or '}'"),
            ('[:]', 1, "Expected value or ']'"),
            ('{"key": [1, 2}', 13, "Expected ',' or ']'"),
            ('{"a": }', 6, 'Expected value'),
        ],
    )
    def test_syntax_errors(self, text, column, message):
        with pytest.raises(JsonSyntaxError) as excinfo:
            _consume(text)
        assert excinfo.value.column == column
        assert excinfo.value.line == 1
        assert excinfo.value.reason.startswith(message)

    def test_first_token_must_open_a_container(self):
        with pytest.raises(JsonSyntaxError, match=r"Expected '\{' or '\['"):
            _consume('"a"')

    def test_unclosed_record_is_incomplete(self):
        with pytest.raises(JsonIncompleteError, match='Unclosed brackets'):
            _consume('{"a": [1, 2')

    def test_start_past_end_is_incomplete(self):
        with pytest.raises(JsonIncompleteError):
            _consume('{}', start_index=2)


def test_state_table_covers_every_reachable_state():
    object_states = {
        ParserState.EXPECT_KEY,
        ParserState.EXPECT_COLON,
        ParserState.EXPECT_VALUE,
        ParserState.EXPECT_COMMA_OR_END,
        ParserState.EXPECT_CLOSE,
    }
    array_states = object_states - {ParserState.EXPECT_KEY, ParserState.EXPECT_COLON}
    assert {s for s, t in STATE_TRANSITIONS if t == NodeType.OBJECT} == object_states
    assert {s for s, t in STATE_TRANSITIONS if t == NodeType.ARRAY} == array_states


def test_describe_expectation_uses_container_closer():
    assert describe_expectation(ParserState.EXPECT_CLOSE, NodeType.ARRAY) == "']'"
    assert (
        describe_expectation(ParserState.EXPECT_COMMA_OR_END, NodeType.OBJECT)
        == "',' or '}'"
    )
