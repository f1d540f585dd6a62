from typing import Iterable, List, Optional, Sequence

from rainbowjson._core.config.config import DEFAULT_TOKEN_TYPES
from rainbowjson._core.parsers.nodes import RainbowJsonNode
from rainbowjson._core.schema import RichBaseModel
from rainbowjson.highlight.frequency import PATH_SEPARATOR, KeyPathStat


class HighlightSpan(RichBaseModel):
    """A single-line range of a key token and the color category it gets."""

    line: int
    start_column: int
    end_column: int
    token_type: str


def reversed_signature(path: Sequence[str]) -> str:
    """Leaf first signature, so a truncated path is a prefix of the full one."""
    return PATH_SEPARATOR.join(reversed(path))


def keys_to_highlight(stats: Iterable[KeyPathStat]) -> List[str]:
    return [reversed_signature(stat.path) for stat in stats]


def match_highlight_index(
    keys: Sequence[str], path: Sequence[str]
) -> Optional[int]:
    """Index of the first highlight key starting with the signature of ``path``."""
    signature = reversed_signature(path)
    for index, key in enumerate(keys):
        if key.startswith(signature):
            return index
    return None


def _push_node_spans(
    record: RainbowJsonNode,
    keys: Sequence[str],
    token_types: Sequence[str],
    spans: List[HighlightSpan],
) -> None:
    stack = [(record, [])]
    while stack:
        node, path = stack.pop()
        if node.parent_key:
            path = path + [node.parent_key]
            index = match_highlight_index(keys, path)
            if index is not None:
                key_position = node.parent_key_position
                spans.append(
                    HighlightSpan(
                        line=key_position.line,
                        start_column=key_position.column,
                        end_column=key_position.column + len(node.parent_key),
                        token_type=token_types[index % len(token_types)],
                    )
                )
        stack.extend((child, path) for child in reversed(node.children))


def collect_highlight_spans(
    records: Iterable[RainbowJsonNode],
    keys: Sequence[str],
    token_types: Sequence[str] = DEFAULT_TOKEN_TYPES,
) -> List[HighlightSpan]:
    """
    Compute the key spans to color for a set of parsed records.

    Only the key token is covered, never the value it maps to.
    """
    spans: List[HighlightSpan] = []
    if not keys:
        return spans
    for record in records:
        _push_node_spans(record, keys, token_types, spans)
    return spans
