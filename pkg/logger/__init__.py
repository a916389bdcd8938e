from .constant import LogLevel
from .type import LoggerConfig
from .logger import Logger, ILogger

__all__ = ["Logger", "ILogger", "LoggerConfig", "LogLevel"]
