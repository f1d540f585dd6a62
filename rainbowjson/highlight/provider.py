from typing import Dict, Hashable, List, Optional, Sequence

from rainbowjson._core.config.config import HighlightConfig
from rainbowjson._core.logging import get_logger
from rainbowjson._core.parsers.json_parse import try_parse_json_objects
from rainbowjson._core.utils import Timer
from rainbowjson.highlight.frequency import KeyPathStat, calculate_key_frequency_stats
from rainbowjson.highlight.spans import (
    HighlightSpan,
    collect_highlight_spans,
    keys_to_highlight,
)
from rainbowjson.highlight.window import LineRange, extend_range_by_margin, slice_document

logger = get_logger(__name__)


class RainbowHighlighter:
    """
    Computes key highlights for the visible part of JSON / JSON-Lines documents.

    The most frequent key paths of each document are computed once from the
    whole document and cached by document id until ``invalidate`` is called,
    typically on every edit. Highlights for a visible range are recomputed
    on each request from a window of ``margin_lines`` around it.
    """

    def __init__(self, config: Optional[HighlightConfig] = None):
        self.config = config or HighlightConfig()
        self._key_stats: Dict[Hashable, List[KeyPathStat]] = {}

    def key_stats(
        self, doc_id: Hashable, document_lines: Sequence[str]
    ) -> List[KeyPathStat]:
        if doc_id not in self._key_stats:
            with Timer() as timer:
                stats = calculate_key_frequency_stats(
                    document_lines,
                    list(range(len(document_lines))),
                    max_num_keys=self.config.max_keys,
                )
            logger.log_performance(
                'key_stats',
                timer.elapsed_time,
                doc=repr(doc_id),
                lines=len(document_lines),
                keys=len(stats),
            )
            self._key_stats[doc_id] = stats
        return self._key_stats[doc_id]

    def invalidate(self, doc_id: Hashable) -> None:
        """Drop the cached statistics of one document."""
        self._key_stats.pop(doc_id, None)

    def clear(self) -> None:
        self._key_stats.clear()

    def is_cached(self, doc_id: Hashable) -> bool:
        return doc_id in self._key_stats

    def provide_highlights(
        self,
        doc_id: Hashable,
        document_lines: Sequence[str],
        visible_range: LineRange,
        language_id: str = 'json',
    ) -> Optional[List[HighlightSpan]]:
        """
        Highlight spans for the keys inside ``visible_range`` and its margin.

        Returns:
            ``None`` when the language is not handled or the window fails to
            parse, otherwise the list of spans (empty when nothing qualifies).
        """
        if language_id not in self.config.languages:
            return None

        keys = keys_to_highlight(self.key_stats(doc_id, document_lines))
        if not keys:
            logger.debug(f'No keys to highlight for {doc_id!r}')
            return []

        window = extend_range_by_margin(
            visible_range, self.config.margin_lines, len(document_lines)
        )
        lines, line_numbers = slice_document(document_lines, window)
        result = try_parse_json_objects(lines, line_numbers)
        if not result.ok:
            logger.warning(
                f'Skipping highlights for {doc_id!r}: {result.error.message}'
            )
            return None

        spans = collect_highlight_spans(result.records, keys, self.config.token_types)
        logger.debug(
            f'{len(spans)} highlight spans from {len(result.records)} records '
            f'in lines {window.start_line}..{window.end_line}'
        )
        return spans
