"""Synchronous console logger with level colors and icons."""

import sys
import traceback
from typing import Optional, TextIO

from colorama import Fore, Style, just_fix_windows_console

from lenient_bool.utils.logger.config import LogLevel, LoggerConfig
from lenient_bool.utils.misc import time_iso8601

just_fix_windows_console()


LOG_COLORS = {
    LogLevel.TRACE: Fore.LIGHTBLACK_EX,
    LogLevel.DEBUG: Fore.LIGHTBLACK_EX,
    LogLevel.INFO: Fore.GREEN,
    LogLevel.WARNING: Fore.YELLOW,
    LogLevel.ERROR: Fore.RED + Style.BRIGHT,
    LogLevel.CRITICAL: Fore.RED + Style.BRIGHT,
}

ICONS = {
    LogLevel.TRACE:"🔍", LogLevel.DEBUG:"🐞", LogLevel.INFO:"ℹ️",
    LogLevel.WARNING:"⚠️", LogLevel.ERROR:"❌", LogLevel.CRITICAL:"🔥",
}


class Logger:
    """Logger that formats records and writes them straight to a stream."""

    def __init__(
        self,
        config: LoggerConfig = None,
        name: str = "",
        stream: Optional[TextIO] = None,
    ):
        """Initialise the logger with optional configuration and stream.

        :param config: Configuration settings controlling level and format.
        :param name: Name prefix used in emitted log records.
        :param stream: Output stream; ``sys.stderr`` is looked up per call when omitted.
        """
        self._config = config
        if self._config is None:
            self._config = LoggerConfig()

        self._name = name
        self._stream = stream

    def _process_log(self, level: LogLevel, msg: str) -> None:
        """Format a message and write it if streaming is enabled.

        :param level: Severity level associated with the message.
        :param msg: Log message text.
        """
        if not self._config.do_stream:
            return
        try:
            log_msg = self._config.str_format % {
                "asctime": time_iso8601(),
                "icon": ICONS.get(level, "•"),
                "name": self._name,
                "levelname": level.name,
                "message": msg,
            }
            if self._config.use_color:
                log_msg = LOG_COLORS.get(level, "") + log_msg + Style.RESET_ALL

            stream = self._stream if self._stream is not None else sys.stderr
            print(log_msg, file=stream)
        except Exception:
            traceback.print_exc(file=sys.stderr)

    def _log(self, level: LogLevel, msg: str) -> None:
        if self._config.base_level <= level:
            self._process_log(level, msg)

    def set_format(self, format_string: str) -> None:
        """Modify the format string used when rendering log messages.

        :param format_string: New format string compatible with logger substitutions.
        :raises ValueError: If ``format_string`` lacks the message placeholder.
        """
        if "%(message)s" not in format_string:
            raise ValueError("Format string must contain '%(message)s' placeholder")
        self.debug(f"Changing format string from {self._config.str_format} to {format_string}")
        self._config.str_format = format_string

    def set_log_level(self, level: LogLevel) -> None:
        """Modify the logger's base log level at runtime.

        :param level: New minimum level accepted by the logger.
        """
        self.debug(f"Changing base log level from {self._config.base_level} to {level}")
        self._config.base_level = level

    def trace(self, msg: str) -> None:
        self._log(LogLevel.TRACE, msg)

    def debug(self, msg: str) -> None:
        self._log(LogLevel.DEBUG, msg)

    def info(self, msg: str) -> None:
        self._log(LogLevel.INFO, msg)

    def warning(self, msg: str) -> None:
        self._log(LogLevel.WARNING, msg)

    def error(self, msg: str) -> None:
        self._log(LogLevel.ERROR, msg)

    def critical(self, msg: str) -> None:
        self._log(LogLevel.CRITICAL, msg)

    def get_name(self) -> str:
        """Return the logger name."""
        return self._name

    def get_config(self) -> LoggerConfig:
        """Return the logger configuration object."""
        return self._config

