"""Configuration objects and enums used by the logging subsystem."""

from enum import IntEnum


class LogLevel(IntEnum):
    """Severity levels understood by the console logger."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5


class LoggerConfig:
    """Runtime configuration for :class:`lenient_bool.utils.logger.logger.Logger`."""

    def __init__(
        self,
        base_level: LogLevel = LogLevel.INFO,
        do_stream: bool = True,
        str_format: str = "%(asctime)s %(icon)s [%(levelname)s] %(name)s - %(message)s",
        use_color: bool = True,
    ):
        """Initialise configuration defaults for a :class:`Logger`.

        :param base_level: Minimum severity that will be recorded.
        :param do_stream: Whether messages are written to the output stream.
        :param str_format: Format string applied to log messages.
        :param use_color: Whether lines are wrapped in level colors.
        :raises ValueError: If validation of supplied values fails.
        """
        if not isinstance(base_level, LogLevel):
            raise ValueError(f"Invalid base level; expected LogLevel but got {type(base_level)}")

        self.base_level = base_level
        self.do_stream = do_stream
        self.use_color = use_color
        self.str_format = str_format

        if "%(message)s" not in self.str_format:
            raise ValueError("Format string must contain '%(message)s' placeholder")
