import io
import logging
import time
from contextlib import contextmanager
from logging import StreamHandler
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from rainbowjson._core.environment import settings
from rainbowjson._core.utils import Timer

# --- Global State ---
_log_stats: Dict[str, Dict[str, int]] = {}
_session_start_time: float = time.monotonic()
_logging_configured = False
DEFAULT_LOG_LEVEL = 'INFO'
LEVEL_NAMES = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class RichLogger(logging.Logger):
    """
    A custom logger class that counts emitted records per level and adds a
    few higher level helpers for tables and timed operations.
    """

    def _log(
        self,
        level,
        msg,
        args,
        exc_info=None,
        extra=None,
        stack_info=False,
        stacklevel=1,
        **kwargs,
    ):
        """Count the record per logger and level, then emit it."""
        stats = _log_stats.setdefault(self.name, dict.fromkeys(LEVEL_NAMES, 0))
        level_name = logging.getLevelName(level)
        if level_name in stats:
            stats[level_name] += 1
        super()._log(level, msg, args, exc_info, extra, stack_info, stacklevel)

    def log_table(
        self,
        data: List[Dict[str, Any]],
        title: Optional[str] = None,
        columns: Optional[List[str]] = None,
        level: int = logging.INFO,
    ) -> None:
        """Logs a list of dictionaries as a formatted table string."""
        if not self.isEnabledFor(level):
            return

        if not data:
            self.log(level, f"{title or 'Table'}: No data to display")
            return

        # Render the Rich table to a string instead of printing directly
        console = Console(file=io.StringIO(), record=True, width=120)
        table = Table(title=title, show_header=True, header_style='bold magenta')
        columns = columns or list(data[0].keys())
        for col in columns:
            table.add_column(str(col), style='cyan', no_wrap=False)
        for row in data:
            values = [str(row.get(col, '')) for col in columns]
            table.add_row(*values)

        console.print(table)
        table_str = console.export_text(clear=True)
        self.log(level, f'\n{table_str}')

    def log_performance(self, operation: str, duration: float, **metrics: Any):
        """Log performance metrics for a specific operation."""
        msg = f'Performance | {operation} | Duration: {duration:.6f}s'
        if metrics:
            metric_str = ' | '.join(f'{k}={v}' for k, v in metrics.items())
            msg += f' | {metric_str}'
        self.debug(msg)

    def log_exception(self, e: Exception, message: Optional[str] = None):
        """Log an exception with traceback."""
        msg = message or f'Exception occurred: {type(e).__name__}: {e}'
        self.error(msg, exc_info=True)

    @contextmanager
    def log_operation(self, operation_name: str, level: int = logging.DEBUG):
        """Context manager for logging the start, end, and duration of an operation."""
        if self.isEnabledFor(level):
            self.log(level, f'Starting | {operation_name}')
            timer = Timer()
            try:
                yield timer
            except Exception:
                timer.stop()
                self.log(
                    level,
                    f'Failed    | {operation_name} after {timer.elapsed_time:.6f}s',
                )
                raise
            else:
                timer.stop()
                self.log(
                    level,
                    f'Completed | {operation_name} in {timer.elapsed_time:.6f}s',
                )
        else:
            yield Timer()


def configure_logging(
    level: Optional[str] = None,
    use_rich: Optional[bool] = None,
    format_string: Optional[str] = None,
    file_path: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Configures the package logging system.

    Prioritizes direct function arguments over global settings, which in turn
    are loaded from environment variables or .env files.

    Args:
        level: Override the log level (e.g., 'DEBUG').
        use_rich: Override the use of rich formatting.
        format_string: Override the log format string.
        file_path: Override the log file path.
        force: If True, will overwrite an existing configuration.
    """
    global _logging_configured, _session_start_time
    logging.setLoggerClass(RichLogger)
    init_logger = logging.getLogger(__name__)

    if _logging_configured and not force:
        init_logger.debug('Logging already configured. Skipping reconfiguration.')
        return

    if not _logging_configured:
        _session_start_time = time.monotonic()

    # 1. Resolve configuration, prioritizing direct arguments over global settings.
    final_level = level or settings.log_level
    # `False` is a valid override, so check for `is not None`.
    final_use_rich = use_rich if use_rich is not None else settings.log_use_rich
    final_format_string = format_string or settings.log_format_string
    final_file_path = file_path or settings.log_file_path

    # 2. Configure the package logger
    package_logger = logging.getLogger('rainbowjson')
    package_logger.setLevel(final_level.upper())

    if package_logger.hasHandlers():
        package_logger.handlers.clear()

    init_logger.debug(
        f'--- Configuring logging. Level: {final_level}, Rich: {final_use_rich} ---'
    )

    if final_use_rich:
        handler = RichHandler(rich_tracebacks=True, show_path=False, markup=False)
        formatter = logging.Formatter('%(message)s', datefmt='[%X]')
    elif final_format_string:
        handler = StreamHandler()
        formatter = logging.Formatter(final_format_string)
    else:
        handler = StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s | %(name)-20s | %(levelname)-8s | %(message)s'
        )

    handler.setFormatter(formatter)
    package_logger.addHandler(handler)

    # Configure file handler if a path is provided
    if final_file_path:
        try:
            Path(final_file_path).parent.mkdir(parents=True, exist_ok=True)
            file_formatter_str = (
                final_format_string
                or '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
            )
            file_handler = logging.FileHandler(final_file_path, mode='a')
            file_handler.setFormatter(logging.Formatter(file_formatter_str))
            package_logger.addHandler(file_handler)
            init_logger.debug(f'Logging also configured for file: {final_file_path}')
        except OSError as e:
            package_logger.error(
                f'Failed to configure file handler at {final_file_path}: {e}'
            )

    _logging_configured = True


def is_logging_configured() -> bool:
    return _logging_configured


def get_logger(name: str) -> RichLogger:
    """
    Gets a logger instance. If logging is not yet configured,
    it applies a safe default configuration first.
    """
    if not _logging_configured:
        configure_logging()
    return logging.getLogger(name)


def log_summary(level: int = logging.INFO) -> None:
    """Logs a per logger table of the messages emitted during the session."""
    logger = get_logger('rainbowjson.summary')
    total_runtime = time.monotonic() - _session_start_time
    rows = [
        {'logger': name, **stats, 'total': sum(stats.values())}
        for name, stats in sorted(_log_stats.items())
        if any(stats.values())
    ]
    grand_total = sum(row['total'] for row in rows)
    logger.log_table(
        rows,
        title=f'Logging summary ({total_runtime:.2f}s)',
        columns=['logger', *LEVEL_NAMES, 'total'],
        level=level,
    )
    logger.log(level, f'Grand total: {grand_total} messages')


# CONVENIENCE ACCESS
logger: RichLogger = get_logger('rainbowjson')


__all__ = [
    'configure_logging',
    'get_logger',
    'is_logging_configured',
    'log_summary',
    'RichLogger',
    'logger',
]
