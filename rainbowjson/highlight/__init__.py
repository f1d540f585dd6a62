from rainbowjson.highlight.frequency import (
    KeyPathStat,
    calculate_key_frequency_stats,
    get_path_signature,
)
from rainbowjson.highlight.provider import RainbowHighlighter
from rainbowjson.highlight.spans import (
    HighlightSpan,
    collect_highlight_spans,
    keys_to_highlight,
)
from rainbowjson.highlight.window import LineRange, extend_range_by_margin, slice_document

__all__ = [
    'HighlightSpan',
    'KeyPathStat',
    'LineRange',
    'RainbowHighlighter',
    'calculate_key_frequency_stats',
    'collect_highlight_spans',
    'extend_range_by_margin',
    'get_path_signature',
    'keys_to_highlight',
    'slice_document',
]
