import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from rainbowjson._core.logging import get_logger
from rainbowjson._core.parsers.json_parse import try_parse_json_objects
from rainbowjson._core.parsers.nodes import RainbowJsonNode
from rainbowjson._core.schema import RichBaseModel

logger = get_logger(__name__)

PATH_SEPARATOR = '->'


class KeyPathStat(RichBaseModel):
    """How many times a key path occurs in a document."""

    path: List[str]
    count: int


@dataclass
class _KeyPathCounter:
    path: List[str]
    count: int
    order: int


def get_path_signature(path: Optional[Sequence[str]]) -> Optional[str]:
    """Join a key path into the string used to compare paths, ``None`` if empty."""
    return PATH_SEPARATOR.join(path) if path else None


def collect_keys_from_node(
    node: RainbowJsonNode, path: List[str], freq_map: Dict[str, _KeyPathCounter]
) -> None:
    """
    Count every key path below ``node`` into ``freq_map``.

    Array elements have no parent key, so they do not extend the path. The
    walk is pre-order with an explicit stack, records can nest arbitrarily deep.
    """
    stack = [(node, path)]
    while stack:
        current, current_path = stack.pop()
        if current.parent_key:
            current_path = current_path + [current.parent_key]
            signature = get_path_signature(current_path)
            counter = freq_map.get(signature)
            if counter is None:
                freq_map[signature] = _KeyPathCounter(current_path, 1, len(freq_map))
            else:
                counter.count += 1
        stack.extend((child, current_path) for child in reversed(current.children))


def rank_key_paths(
    records: Sequence[RainbowJsonNode], max_num_keys: Optional[int] = None
) -> List[KeyPathStat]:
    """Most frequent key paths first, ties broken by first appearance."""
    freq_map: Dict[str, _KeyPathCounter] = {}
    for record in records:
        collect_keys_from_node(record, [], freq_map)

    ranked = sorted(freq_map.values(), key=lambda c: (-c.count, c.order))
    if max_num_keys is not None:
        ranked = ranked[:max_num_keys]
    return [KeyPathStat(path=c.path, count=c.count) for c in ranked]


def calculate_key_frequency_stats(
    lines: Sequence[str],
    line_numbers: Sequence[int],
    max_num_keys: Optional[int] = None,
) -> List[KeyPathStat]:
    """
    Parse a whole document and rank its key paths by frequency.

    A document that fails to parse yields no statistics.
    """
    result = try_parse_json_objects(lines, line_numbers)
    if not result.ok:
        logger.warning(
            f'JSON parsing error in frequency stats ({result.error_kind}): '
            f'{result.error.message}'
        )
        return []

    stats = rank_key_paths(result.records, max_num_keys)
    logger.log_table(
        [{'path': get_path_signature(s.path), 'count': s.count} for s in stats],
        title='Key frequency',
        level=logging.DEBUG,
    )
    return stats
