"""
Pushdown automaton turning one complete container span into a node tree.

Every open container has a frame on an explicit stack. A frame holds the
states it may legally be in for the next token; more than one state is
possible right after an opener, where either a first entry or the closing
bracket may follow. Transitions are looked up in a static table keyed by
(state, container type).
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from rainbowjson._core.error import JsonIncompleteError, JsonSyntaxError
from rainbowjson._core.parsers.nodes import NodeType, Position, RainbowJsonNode
from rainbowjson._core.parsers.tokens import (
    Token,
    TokenType,
    closer_for,
    closer_literal,
    container_type_for,
    is_open_bracket,
    is_scalar,
)
from rainbowjson._core.schema import RichEnum


class ParserState(RichEnum):
    EXPECT_KEY = 'expect_key'
    EXPECT_COLON = 'expect_colon'
    EXPECT_VALUE = 'expect_value'
    EXPECT_COMMA_OR_END = 'expect_comma_or_end'
    EXPECT_CLOSE = 'expect_close'


class Action(RichEnum):
    ADVANCE = 'advance'
    ADD_SCALAR = 'add_scalar'
    PUSH_CONTAINER = 'push_container'
    POP_CONTAINER = 'pop_container'


States = Tuple[ParserState, ...]


@dataclass
class ParseFrame:
    node: RainbowJsonNode
    expected: States
    array_index: int = 0
    current_key: Optional[Token] = None


@dataclass(frozen=True)
class Transition:
    action: Action
    # States of the current frame once the action is applied.
    next_states: States = ()


AFTER_ENTRY: States = (ParserState.EXPECT_COMMA_OR_END,)
INITIAL_STATES: Dict[NodeType, States] = {
    NodeType.OBJECT: (ParserState.EXPECT_KEY, ParserState.EXPECT_CLOSE),
    NodeType.ARRAY: (ParserState.EXPECT_VALUE, ParserState.EXPECT_CLOSE),
}


def _expect_key(token: Token, frame: ParseFrame) -> Optional[Transition]:
    if token.token_type != TokenType.STRING:
        return None
    frame.current_key = token
    return Transition(Action.ADVANCE, (ParserState.EXPECT_COLON,))


def _expect_colon(token: Token, frame: ParseFrame) -> Optional[Transition]:
    if token.token_type != TokenType.COLON:
        return None
    return Transition(Action.ADVANCE, (ParserState.EXPECT_VALUE,))


def _expect_value(token: Token, frame: ParseFrame) -> Optional[Transition]:
    if is_scalar(token):
        return Transition(Action.ADD_SCALAR, AFTER_ENTRY)
    if is_open_bracket(token):
        return Transition(Action.PUSH_CONTAINER, AFTER_ENTRY)
    return None


def _expect_close(token: Token, frame: ParseFrame) -> Optional[Transition]:
    if token.token_type != closer_for(frame.node.node_type):
        return None
    return Transition(Action.POP_CONTAINER)


def _expect_object_comma_or_end(token: Token, frame: ParseFrame) -> Optional[Transition]:
    if token.token_type == TokenType.COMMA:
        return Transition(Action.ADVANCE, (ParserState.EXPECT_KEY,))
    return _expect_close(token, frame)


def _expect_array_comma_or_end(token: Token, frame: ParseFrame) -> Optional[Transition]:
    if token.token_type == TokenType.COMMA:
        frame.array_index += 1
        return Transition(Action.ADVANCE, (ParserState.EXPECT_VALUE,))
    return _expect_close(token, frame)


TransitionHandler = Callable[[Token, ParseFrame], Optional[Transition]]

STATE_TRANSITIONS: Dict[Tuple[ParserState, NodeType], TransitionHandler] = {
    (ParserState.EXPECT_KEY, NodeType.OBJECT): _expect_key,
    (ParserState.EXPECT_COLON, NodeType.OBJECT): _expect_colon,
    (ParserState.EXPECT_VALUE, NodeType.OBJECT): _expect_value,
    (ParserState.EXPECT_VALUE, NodeType.ARRAY): _expect_value,
    (ParserState.EXPECT_COMMA_OR_END, NodeType.OBJECT): _expect_object_comma_or_end,
    (ParserState.EXPECT_COMMA_OR_END, NodeType.ARRAY): _expect_array_comma_or_end,
    (ParserState.EXPECT_CLOSE, NodeType.OBJECT): _expect_close,
    (ParserState.EXPECT_CLOSE, NodeType.ARRAY): _expect_close,
}


def describe_expectation(state: ParserState, node_type: NodeType) -> str:
    closer = closer_literal(node_type)
    if state == ParserState.EXPECT_KEY:
        return 'string key'
    if state == ParserState.EXPECT_COLON:
        return "':'"
    if state == ParserState.EXPECT_VALUE:
        return 'value'
    if state == ParserState.EXPECT_COMMA_OR_END:
        return f"',' or '{closer}'"
    return f"'{closer}'"


def _new_child(
    node_type: NodeType, token: Token, frame: ParseFrame
) -> RainbowJsonNode:
    child = RainbowJsonNode(node_type=node_type, start_position=token.position)
    if frame.node.node_type == NodeType.OBJECT:
        child.parent_key = frame.current_key.value
        child.parent_key_position = frame.current_key.position
    else:
        child.parent_array_index = frame.array_index
    frame.node.children.append(child)
    return child


def _step(token: Token, frame: ParseFrame) -> Transition:
    node_type = frame.node.node_type
    for state in frame.expected:
        transition = STATE_TRANSITIONS[(state, node_type)](token, frame)
        if transition is not None:
            return transition

    expected = ' or '.join(describe_expectation(s, node_type) for s in frame.expected)
    raise JsonSyntaxError(
        f'Expected {expected}, got {token.value!r}', token.line, token.column
    )


def consume_record(
    tokens: Sequence[Token], start_index: int
) -> Tuple[RainbowJsonNode, int]:
    """
    Parse the container starting at ``tokens[start_index]``.

    Args:
        tokens: The token stream.
        start_index: Index of the opening bracket of the record.

    Returns:
        The root node of the record and the index just past its closing bracket.

    Raises:
        JsonSyntaxError: If a token violates the JSON grammar.
        JsonIncompleteError: If the stream ends before the record is closed.
    """
    if start_index >= len(tokens):
        raise JsonIncompleteError(f'No record to parse at token index {start_index}')

    start_token = tokens[start_index]
    if not is_open_bracket(start_token):
        raise JsonSyntaxError(
            f"Expected '{{' or '[', got {start_token.value!r}",
            start_token.line,
            start_token.column,
        )

    root_type = container_type_for(start_token)
    root = RainbowJsonNode(node_type=root_type, start_position=start_token.position)
    stack: List[ParseFrame] = [ParseFrame(root, INITIAL_STATES[root_type])]

    token_index = start_index + 1
    while token_index < len(tokens):
        token = tokens[token_index]
        frame = stack[-1]
        transition = _step(token, frame)
        token_index += 1

        if transition.action == Action.POP_CONTAINER:
            frame.node.end_position = token.position
            stack.pop()
            if not stack:
                return root, token_index
            continue

        frame.expected = transition.next_states
        if transition.action == Action.ADD_SCALAR:
            scalar = _new_child(NodeType.SCALAR, token, frame)
            scalar.value = token.value
            scalar.end_position = Position(token.line, token.end_column)
        elif transition.action == Action.PUSH_CONTAINER:
            child_type = container_type_for(token)
            child = _new_child(child_type, token, frame)
            stack.append(ParseFrame(child, INITIAL_STATES[child_type]))

    raise JsonIncompleteError(
        f'Unclosed brackets at end of input: {len(stack)} container(s) still open, '
        f'record started at line {start_token.line}, column {start_token.column}'
    )
