"""
Object grouping pass.

Finds every bracket-balanced container span in a token stream that may start
and end in the middle of a larger document. Spans nested inside another
complete span are not reported separately; spans nested inside a container
whose opener or closer lies outside the window are reported together with
the number of enclosing brackets that were cut off.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

from rainbowjson._core.error import JsonSyntaxError
from rainbowjson._core.logging import get_logger
from rainbowjson._core.parsers.tokens import (
    Token,
    closes,
    is_close_bracket,
    is_open_bracket,
)

logger = get_logger(__name__)


@dataclass
class CompleteObjectGroup:
    """A closed token range ``[first_token_index, last_token_index]``."""

    first_token_index: int
    last_token_index: int
    relative_depth: int = 0

    @property
    def token_count(self) -> int:
        return self.last_token_index - self.first_token_index + 1


@dataclass
class _OpenFrame:
    open_index: int
    completed_children: List[CompleteObjectGroup] = field(default_factory=list)


def group_into_complete_spans(tokens: Sequence[Token]) -> List[CompleteObjectGroup]:
    """
    Group a token stream into complete top level container spans.

    Only bracket tokens are inspected. A closer with no opener in the window
    means every span collected so far sits one level deeper than assumed. A
    container whose closer never arrives still surfaces the complete spans
    found inside it, in source order, once the scan ends.

    Raises:
        JsonSyntaxError: If a closer does not match the kind of its opener.
    """
    groups: List[CompleteObjectGroup] = []
    stack: List[_OpenFrame] = []

    for token_index, token in enumerate(tokens):
        if is_open_bracket(token):
            stack.append(_OpenFrame(token_index))
            continue
        if not is_close_bracket(token):
            continue

        if not stack:
            for group in groups:
                group.relative_depth += 1
            continue

        frame = stack.pop()
        opener = tokens[frame.open_index]
        if not closes(opener, token):
            raise JsonSyntaxError(
                f'Closing {token.value!r} does not match opening {opener.value!r} '
                f'at line {opener.line}, column {opener.column}',
                token.line,
                token.column,
            )

        # Children of a closed frame are part of its span and are dropped.
        group = CompleteObjectGroup(frame.open_index, token_index, len(stack))
        if stack:
            stack[-1].completed_children.append(group)
        else:
            groups.append(group)

    # Frames still open wrap a truncated tail, outermost first keeps source order.
    for frame in stack:
        groups.extend(frame.completed_children)

    logger.debug(
        f'Grouped {len(tokens)} tokens into {len(groups)} complete spans '
        f'({len(stack)} unclosed containers)'
    )
    return groups
