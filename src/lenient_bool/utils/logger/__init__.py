from lenient_bool.utils.logger.config import LogLevel, LoggerConfig
from lenient_bool.utils.logger.logger import Logger

__all__ = ["LogLevel", "LoggerConfig", "Logger"]
