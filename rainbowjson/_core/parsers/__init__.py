from rainbowjson._core.parsers.automaton import ParserState, consume_record
from rainbowjson._core.parsers.grouping import (
    CompleteObjectGroup,
    group_into_complete_spans,
)
from rainbowjson._core.parsers.json_parse import (
    ParseErrorKind,
    ParseResult,
    parse_json_objects,
    try_parse_json_objects,
)
from rainbowjson._core.parsers.nodes import NodeType, Position, RainbowJsonNode
from rainbowjson._core.parsers.tokenizer import (
    tokenize_line,
    tokenize_line_into,
    tokenize_lines,
)
from rainbowjson._core.parsers.tokens import Token, TokenType

__all__ = [
    'CompleteObjectGroup',
    'NodeType',
    'ParseErrorKind',
    'ParseResult',
    'ParserState',
    'Position',
    'RainbowJsonNode',
    'Token',
    'TokenType',
    'consume_record',
    'group_into_complete_spans',
    'parse_json_objects',
    'tokenize_line',
    'tokenize_line_into',
    'tokenize_lines',
    'try_parse_json_objects',
]
