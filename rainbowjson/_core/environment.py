import os
from typing import Any, List, Optional

from dotenv import find_dotenv
from pydantic import BaseModel, Field, GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema
from pydantic_settings import BaseSettings, SettingsConfigDict

###################################
# .env File Loading Logic
# 1. It first checks for an environment variable `ENV_PATH` for an explicit file path.
# 2. If `ENV_PATH` is not set or the file doesn't exist, it falls back to `find_dotenv()`,
#    which automatically searches for a `.env` file in the current and parent directories.
###################################


env_path_from_var = os.getenv('ENV_PATH')
dotenv_path = (
    env_path_from_var
    if env_path_from_var and os.path.exists(env_path_from_var)
    else find_dotenv()
)


class LogLevel(str):
    """Custom type for log levels, ensuring the value is one of the standard levels."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        def validate_log_level(v: str) -> str:
            valid_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
            v_upper = v.upper()
            if v_upper not in valid_levels:
                raise ValueError(f'Log level must be one of: {valid_levels}')
            return v_upper

        return core_schema.no_info_after_validator_function(
            validate_log_level, core_schema.str_schema()
        )


class MarginLines(int):
    """Number of lines added around the visible range before parsing."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        def validate_margin(v: int) -> int:
            if v < 0:
                raise ValueError('Margin must be a non-negative number of lines')
            return v

        return core_schema.no_info_after_validator_function(
            validate_margin, core_schema.int_schema()
        )


###################################
# Core Configuration Schema
###################################
class RainbowJsonConfig(BaseModel):
    """Defines the configuration schema for the rainbowjson package.
    This class does not load from the environment; it only defines the data shape.
    """

    # Logging Settings
    log_level: LogLevel = Field(
        default='INFO', description='The minimum logging level.'
    )
    log_use_rich: bool = Field(
        default=True, description='Use rich for formatted logging output.'
    )
    log_format_string: Optional[str] = Field(
        default=None, description='A custom format string for the console logger.'
    )
    log_file_path: Optional[str] = Field(
        default=None, description='If set, logs will also be written to this file.'
    )

    # Highlight Settings
    highlight_margin_lines: MarginLines = Field(
        default=100,
        description='Lines parsed above and below the visible range of a document.',
    )
    highlight_max_keys: int = Field(
        default=10,
        ge=1,
        description='Maximum number of key paths picked for highlighting per document.',
    )
    highlight_languages: List[str] = Field(
        default_factory=lambda: ['json', 'jsonl'],
        description='Document language ids the highlighter handles.',
    )


###################################
# Settings Initialization
###################################
class AppSettings(BaseSettings, RainbowJsonConfig):
    """Application settings that load from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix='',
        case_sensitive=False,
        validate_assignment=True,
        extra='ignore',
        env_file=dotenv_path,
        env_file_encoding='utf-8',
    )


# Global Settings
settings = AppSettings()
