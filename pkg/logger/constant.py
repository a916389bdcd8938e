from enum import Enum


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


DEFAULT_SERVICE_NAME = "vexination-api"
DEFAULT_LEVEL = LogLevel.INFO
DEFAULT_ENABLE_CONSOLE = True
DEFAULT_COLORIZE = True

# Accepted spellings that loguru does not know
LEVEL_ALIASES = {"WARN": LogLevel.WARNING}

LOG_FORMAT_TIME = "<green>{time:YYYY-MM-DD HH:mm:ss}</green>"
LOG_FORMAT_LEVEL = "<level>{level: <7}</level>"
LOG_FORMAT_SERVICE = "<magenta>{extra[service]}</magenta>"
LOG_FORMAT_REQUEST = "<cyan>{extra[request_id]: <36}</cyan>"
LOG_FORMAT_MESSAGE = "<level>{message}</level>"

SERVICE_KEY = "service"
REQUEST_ID_KEY = "request_id"
