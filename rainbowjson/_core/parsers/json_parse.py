from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from rainbowjson._core.error import (
    JsonIncompleteError,
    JsonSyntaxError,
    JsonTokenizerError,
    ParserInvariantError,
    RainbowJsonError,
)
from rainbowjson._core.logging import get_logger
from rainbowjson._core.parsers.automaton import consume_record
from rainbowjson._core.parsers.grouping import (
    CompleteObjectGroup,
    group_into_complete_spans,
)
from rainbowjson._core.parsers.nodes import RainbowJsonNode
from rainbowjson._core.parsers.tokenizer import tokenize_lines
from rainbowjson._core.parsers.tokens import Token
from rainbowjson._core.schema import RichEnum

logger = get_logger(__name__)


class ParseErrorKind(RichEnum):
    LEXICAL = 'lexical'
    SYNTAX = 'syntax'
    INCOMPLETE = 'incomplete'
    INTERNAL = 'internal'


@dataclass
class ParseResult:
    """
    Outcome of parsing a window of lines.

    Either ``records`` holds every complete root found in the window, or
    ``error_kind`` and ``error`` describe why the whole call failed. A failed
    result never carries partial records.
    """

    records: List[RainbowJsonNode] = field(default_factory=list)
    error_kind: Optional[ParseErrorKind] = None
    error: Optional[RainbowJsonError] = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @property
    def is_document_error(self) -> bool:
        """True when the failure comes from malformed text rather than a defect."""
        return self.error_kind in (ParseErrorKind.LEXICAL, ParseErrorKind.SYNTAX)

    def unwrap(self) -> List[RainbowJsonNode]:
        """Return the records, re-raising the stored error of a failed result."""
        if self.error is not None:
            raise self.error
        return self.records


def _parse_group(tokens: Sequence[Token], group: CompleteObjectGroup) -> RainbowJsonNode:
    try:
        record, next_index = consume_record(tokens, group.first_token_index)
    except JsonIncompleteError as e:
        raise ParserInvariantError(
            f'Span [{group.first_token_index}, {group.last_token_index}] was grouped '
            f'as complete but did not close: {e.message}'
        ) from e

    if next_index != group.last_token_index + 1:
        raise ParserInvariantError(
            f'Span [{group.first_token_index}, {group.last_token_index}] was grouped '
            f'as complete but parsing stopped at token {next_index - 1}'
        )
    record.relative_depth = group.relative_depth
    return record


def parse_json_objects(
    lines: Sequence[str], line_numbers: Sequence[int]
) -> List[RainbowJsonNode]:
    """
    Parse every complete JSON object or array found in a window of lines.

    The window may start and end in the middle of a larger document. Content
    of containers that are cut off by the window is skipped, except for the
    complete containers nested inside them.

    Args:
        lines: Text of each line in the window.
        line_numbers: True document line number of each entry in ``lines``.

    Returns:
        Root nodes in source order, each with its ``relative_depth`` set.

    Raises:
        JsonTokenizerError: A line holds a character no JSON token starts with.
        JsonSyntaxError: A complete span is malformed or brackets mismatch.
        ParserInvariantError: The grouping pass and the parser disagree.
        ValueError: ``lines`` and ``line_numbers`` differ in length.
    """
    with logger.log_operation(f'parse_json_objects ({len(lines)} lines)'):
        tokens = tokenize_lines(lines, line_numbers)
        groups = group_into_complete_spans(tokens)
        records = [_parse_group(tokens, group) for group in groups]

    logger.debug(f'Parsed {len(records)} records from {len(tokens)} tokens')
    return records


def try_parse_json_objects(
    lines: Sequence[str], line_numbers: Sequence[int]
) -> ParseResult:
    """
    Like ``parse_json_objects`` but reports document failures as a ``ParseResult``.

    Raises:
        ValueError: ``lines`` and ``line_numbers`` differ in length. This is a
            caller error, not a property of the document, so it is not folded
            into the result.
    """
    try:
        records = parse_json_objects(lines, line_numbers)
    except JsonTokenizerError as e:
        return ParseResult(error_kind=ParseErrorKind.LEXICAL, error=e)
    except JsonSyntaxError as e:
        return ParseResult(error_kind=ParseErrorKind.SYNTAX, error=e)
    except JsonIncompleteError as e:
        return ParseResult(error_kind=ParseErrorKind.INCOMPLETE, error=e)
    except ParserInvariantError as e:
        logger.log_exception(e, f'Parser invariant violated: {e.message}')
        return ParseResult(error_kind=ParseErrorKind.INTERNAL, error=e)
    return ParseResult(records=records)
