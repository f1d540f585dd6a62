import re
from typing import List, Optional, Pattern, Sequence, Tuple, Union

from rainbowjson._core.error import JsonTokenizerError
from rainbowjson._core.logging import get_logger
from rainbowjson._core.parsers.tokens import PUNCTUATION_TYPES, Token, TokenType

logger = get_logger(__name__)


WHITESPACE = 'whitespace'
PUNCTUATION = 'punctuation'

# JSON tokens never continue onto the next line, so every line is lexed on its own.
# Patterns are tried in order at the cursor and the first match wins.
TOKEN_PATTERNS: Tuple[Tuple[Union[TokenType, str], Pattern[str]], ...] = (
    (WHITESPACE, re.compile(r'\s+')),
    (TokenType.CONSTANT, re.compile(r'true|false|null')),
    # Balances quotes and escapes only, escape sequences are not validated.
    (TokenType.STRING, re.compile(r'"(?:[^"\\]|\\.)*"')),
    # ASCII digits only, as in the JSON number grammar.
    (
        TokenType.NUMBER,
        re.compile(r'-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?'),
    ),
    (PUNCTUATION, re.compile(r'[{}\[\]:,]')),
)


def tokenize_line_into(
    line: str, line_number: Optional[int], dst_tokens: List[Token]
) -> List[Token]:
    """
    Tokenize one line of JSON text, appending the tokens to ``dst_tokens``.

    Args:
        line: The text of the line, without the line terminator.
        line_number: The document line number stamped on every token.
        dst_tokens: The list receiving the tokens.

    Returns:
        ``dst_tokens``, for convenience.

    Raises:
        JsonTokenizerError: If no pattern matches at some column of the line.
    """
    cursor = 0
    length = len(line)

    while cursor < length:
        for token_type, pattern in TOKEN_PATTERNS:
            match = pattern.match(line, cursor)
            if match is None:
                continue
            value = match.group()
            if token_type == PUNCTUATION:
                token_type = PUNCTUATION_TYPES[value]
            if token_type != WHITESPACE:
                dst_tokens.append(Token(token_type, value, line_number, cursor))
            cursor = match.end()
            break
        else:
            raise JsonTokenizerError(
                f'Unexpected character {line[cursor]!r}', line_number, cursor
            )

    return dst_tokens


def tokenize_line(line: str, line_number: Optional[int] = None) -> List[Token]:
    """Tokenize a single line into a new list of tokens."""
    return tokenize_line_into(line, line_number, [])


def tokenize_lines(lines: Sequence[str], line_numbers: Sequence[int]) -> List[Token]:
    """
    Tokenize a window of lines into one concatenated token stream.

    ``line_numbers`` holds the true document line number of each entry in
    ``lines``; they need not be contiguous or zero based.
    """
    if len(lines) != len(line_numbers):
        raise ValueError(
            f'Got {len(lines)} lines but {len(line_numbers)} line numbers'
        )

    tokens: List[Token] = []
    for line, line_number in zip(lines, line_numbers):
        tokenize_line_into(line, line_number, tokens)

    logger.debug(f'Tokenized {len(lines)} lines into {len(tokens)} tokens')
    return tokens
