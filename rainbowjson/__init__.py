from typing import Optional

from rainbowjson._core.config.config import HighlightConfig
from rainbowjson._core.environment import settings
from rainbowjson._core.error import (
    ConfigurationError,
    JsonIncompleteError,
    JsonSyntaxError,
    JsonTokenizerError,
    ParserInvariantError,
    RainbowJsonError,
)
from rainbowjson._core.parsers import (
    NodeType,
    ParseErrorKind,
    ParseResult,
    Position,
    RainbowJsonNode,
    Token,
    TokenType,
    parse_json_objects,
    tokenize_line,
    try_parse_json_objects,
)
from rainbowjson.highlight import LineRange, RainbowHighlighter


def init(
    log_level: Optional[str] = None,
    log_rich: Optional[bool] = None,
) -> None:
    """
    Initialize rainbowjson logging with optional overrides.

    Call once at startup to override the settings read from the environment.
    If not called, logging auto-configures on first use.

    Args:
        log_level: Logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR').
            If None, uses LOG_LEVEL env var or 'INFO'.
        log_rich: Enable rich formatting. If None, uses LOG_USE_RICH env var.

    Example:
        >>> import rainbowjson
        >>> rainbowjson.init(log_level='DEBUG')
    """
    from rainbowjson.logging import configure_logging

    configure_logging(level=log_level, use_rich=log_rich, force=True)


__all__ = [
    # Initialization
    'init',
    # Parsing
    'parse_json_objects',
    'try_parse_json_objects',
    'tokenize_line',
    'ParseResult',
    'ParseErrorKind',
    # Data model
    'RainbowJsonNode',
    'NodeType',
    'Position',
    'Token',
    'TokenType',
    # Errors
    'RainbowJsonError',
    'JsonTokenizerError',
    'JsonSyntaxError',
    'JsonIncompleteError',
    'ParserInvariantError',
    'ConfigurationError',
    # Highlighting
    'HighlightConfig',
    'LineRange',
    'RainbowHighlighter',
    # Environment
    'settings',
]
