from rainbowjson._core.config.config import DEFAULT_TOKEN_TYPES, HighlightConfig

__all__ = ['DEFAULT_TOKEN_TYPES', 'HighlightConfig']
