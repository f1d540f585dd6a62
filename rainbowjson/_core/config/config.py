from os import PathLike
from typing import Any, Dict, List, Optional, Union

import yaml
from yaml import YAMLError

from rainbowjson._core.environment import settings
from rainbowjson._core.error import ConfigurationError

DEFAULT_TOKEN_TYPES = [f'rainbow{i}' for i in range(2, 11)]


class HighlightConfig:
    """
    Highlighting options loaded from a YAML file or provided as a dictionary.

    All options live under a top level ``highlight`` section::

        highlight:
          margin_lines: 50
          max_keys: 8
          languages: [json, jsonl]
          token_types: [rainbow2, rainbow3, rainbow4]

    Options missing from the source fall back to the global ``settings``.
    """

    def __init__(
        self, config_source: Optional[Union[str, PathLike, Dict[str, Any]]] = None
    ) -> None:
        """
        Initialize the HighlightConfig class.

        Args:
            config_source: A path to a YAML file, a dictionary, or None for defaults only
        """
        if config_source is None:
            self._config = {}
        elif isinstance(config_source, dict):
            self._config = config_source
        elif isinstance(config_source, (str, PathLike)):
            self._config = self._load_config(config_source)
        else:
            raise ValueError(
                f'Unsupported config source type: {type(config_source)}. '
                "Only 'str', 'dict' or path-like inputs are supported."
            )

    @staticmethod
    def _load_config(config_file: Union[str, PathLike]) -> Dict[str, Any]:
        try:
            with open(config_file, 'r') as file:
                loaded = yaml.safe_load(file)
        except FileNotFoundError:
            raise ConfigurationError(f'Configuration file not found: {config_file}')
        except YAMLError as e:
            raise ConfigurationError(f'Invalid YAML format: {str(e)}')

        if loaded is None:
            return {}
        if not isinstance(loaded, dict):
            raise ConfigurationError(
                f'Configuration file must hold a mapping, got {type(loaded).__name__}'
            )
        return loaded

    def get(self, key: str, default: Any = None) -> Any:
        """
        Retrieve a configuration value by its key.

        Args:
            key: The configuration key to retrieve, supports dotted notation for nested dictionaries
            default: The default value to return if the key is not found
        """
        config = self._config
        for k in key.split('.'):
            if isinstance(config, dict) and k in config:
                config = config[k]
            else:
                return default
        return config

    @property
    def config(self) -> Dict[str, Any]:
        """A copy of the entire configuration dictionary."""
        return self._config.copy()

    def merge(self, other: 'HighlightConfig') -> None:
        """
        Merge another HighlightConfig into this one, recursively. Values of
        ``other`` win.
        """

        def recursive_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
            for key, value in b.items():
                if key in a and isinstance(a[key], dict) and isinstance(value, dict):
                    a[key] = recursive_merge(a[key], value)
                else:
                    a[key] = value
            return a

        if not isinstance(other, HighlightConfig):
            raise ValueError('Argument to merge must be a HighlightConfig instance.')

        self._config = recursive_merge(self._config, other._config)

    def _get_int(self, key: str, default: int, minimum: int) -> int:
        value = self.get(key, default)
        if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
            raise ConfigurationError(
                f"'{key}' must be an integer >= {minimum}, got {value!r}"
            )
        return value

    def _get_str_list(self, key: str, default: List[str]) -> List[str]:
        value = self.get(key, default)
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigurationError(f"'{key}' must be a list of strings, got {value!r}")
        if not value:
            raise ConfigurationError(f"'{key}' must not be empty")
        return list(value)

    @property
    def margin_lines(self) -> int:
        return self._get_int(
            'highlight.margin_lines', settings.highlight_margin_lines, minimum=0
        )

    @property
    def max_keys(self) -> int:
        return self._get_int('highlight.max_keys', settings.highlight_max_keys, minimum=1)

    @property
    def languages(self) -> List[str]:
        return self._get_str_list('highlight.languages', settings.highlight_languages)

    @property
    def token_types(self) -> List[str]:
        return self._get_str_list('highlight.token_types', DEFAULT_TOKEN_TYPES)
