"""
Token model shared by the tokenizer, the grouping pass and the structural parser.

Tokens never span lines, so each one is fully described by its kind, its
literal text and the (line, column) it starts at.
"""

from dataclasses import dataclass
from typing import Optional

from rainbowjson._core.parsers.nodes import NodeType, Position
from rainbowjson._core.schema import RichEnum


class TokenType(RichEnum):
    STRING = 'String'
    NUMBER = 'Number'
    CONSTANT = 'Constant'
    BRACE_OPEN = 'BraceOpen'
    BRACE_CLOSE = 'BraceClose'
    BRACKET_OPEN = 'BracketOpen'
    BRACKET_CLOSE = 'BracketClose'
    COLON = 'Colon'
    COMMA = 'Comma'


PUNCTUATION_TYPES = {
    '{': TokenType.BRACE_OPEN,
    '}': TokenType.BRACE_CLOSE,
    '[': TokenType.BRACKET_OPEN,
    ']': TokenType.BRACKET_CLOSE,
    ':': TokenType.COLON,
    ',': TokenType.COMMA,
}

SCALAR_TYPES = frozenset({TokenType.STRING, TokenType.NUMBER, TokenType.CONSTANT})
OPEN_TYPES = frozenset({TokenType.BRACE_OPEN, TokenType.BRACKET_OPEN})
CLOSE_TYPES = frozenset({TokenType.BRACE_CLOSE, TokenType.BRACKET_CLOSE})

_MATCHING_CLOSE = {
    TokenType.BRACE_OPEN: TokenType.BRACE_CLOSE,
    TokenType.BRACKET_OPEN: TokenType.BRACKET_CLOSE,
}
_CONTAINER_TYPES = {
    TokenType.BRACE_OPEN: NodeType.OBJECT,
    TokenType.BRACKET_OPEN: NodeType.ARRAY,
}
_CLOSE_FOR_NODE = {
    NodeType.OBJECT: TokenType.BRACE_CLOSE,
    NodeType.ARRAY: TokenType.BRACKET_CLOSE,
}


@dataclass(frozen=True)
class Token:
    token_type: TokenType
    value: str
    line: Optional[int]
    column: int

    @property
    def position(self) -> Position:
        return Position(self.line, self.column)

    @property
    def end_column(self) -> int:
        return self.column + len(self.value)

    def __str__(self) -> str:
        return f'{self.token_type}({self.value!r}) @ {self.line}:{self.column}'


def is_open_bracket(token: Token) -> bool:
    return token.token_type in OPEN_TYPES


def is_close_bracket(token: Token) -> bool:
    return token.token_type in CLOSE_TYPES


def is_bracket(token: Token) -> bool:
    return token.token_type in OPEN_TYPES or token.token_type in CLOSE_TYPES


def is_scalar(token: Token) -> bool:
    return token.token_type in SCALAR_TYPES


def closes(opener: Token, closer: Token) -> bool:
    """Return True if ``closer`` is the bracket kind that terminates ``opener``."""
    return _MATCHING_CLOSE.get(opener.token_type) == closer.token_type


def container_type_for(opener: Token) -> NodeType:
    """Map an opening bracket to the kind of container node it starts."""
    try:
        return _CONTAINER_TYPES[opener.token_type]
    except KeyError:
        raise ValueError(f'{opener} does not open a container') from None


def closer_for(node_type: NodeType) -> TokenType:
    """The closing bracket token type of a container node."""
    return _CLOSE_FOR_NODE[node_type]


def closer_literal(node_type: NodeType) -> str:
    return '}' if node_type == NodeType.OBJECT else ']'
