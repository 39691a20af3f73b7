import json
import sys
from datetime import datetime
from typing import Optional
from enum import Enum

from snapgram.core.config import settings

class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    SUCCESS = "SUCCESS"

class Colors:
    """ANSI color codes for console output"""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'

    WHITE = '\033[37m'
    BRIGHT_BLACK = '\033[90m'
    BRIGHT_RED = '\033[91m'
    BRIGHT_GREEN = '\033[92m'
    BRIGHT_YELLOW = '\033[93m'
    BRIGHT_BLUE = '\033[94m'
    BRIGHT_CYAN = '\033[96m'

class SnapgramLogger:
    """Console logger for Snapgram services with colorized, context-tagged output"""

    def __init__(self, service_name: str = "SNAPGRAM", enable_colors: bool = True, stream=None):
        self.service_name = service_name.upper()
        self.enable_colors = enable_colors
        self.stream = stream

        self.level_colors = {
            LogLevel.DEBUG: Colors.BRIGHT_CYAN,
            LogLevel.INFO: Colors.BRIGHT_BLUE,
            LogLevel.WARNING: Colors.BRIGHT_YELLOW,
            LogLevel.ERROR: Colors.BRIGHT_RED,
            LogLevel.SUCCESS: Colors.BRIGHT_GREEN,
        }

    def _get_timestamp(self) -> str:
        return datetime.now().strftime("%H:%M:%S.%f")[:-3]

    def _colorize(self, text: str, color: str) -> str:
        if not self.enable_colors:
            return text
        return f"{color}{text}{Colors.RESET}"

    def _format_message(self, level: LogLevel, message: str, context: Optional[str] = None) -> str:
        """Format: [TIMESTAMP] [SERVICE/CONTEXT] [LEVEL] Message"""
        level_color = self.level_colors.get(level, Colors.WHITE)
        level_text = self._colorize(f"[{level.value}]", level_color + Colors.BOLD)

        service_context = self.service_name
        if context:
            service_context += f"/{context.upper()}"

        service_text = self._colorize(f"[{service_context}]", Colors.BRIGHT_BLACK)
        timestamp_text = self._colorize(f"[{self._get_timestamp()}]", Colors.DIM)

        return f"{timestamp_text} {service_text} {level_text} {message}"

    def _format_extras(self, extras: dict) -> str:
        parts = []
        for key, value in extras.items():
            if isinstance(value, (dict, list)):
                value_str = json.dumps(value, default=str, separators=(',', ':'))
                if len(value_str) > 100:
                    value_str = value_str[:100] + "..."
            else:
                value_str = str(value)
            parts.append(f"{key}={value_str}")
        return ", ".join(parts)

    def _log(self, level: LogLevel, message: str, context: Optional[str] = None, **kwargs):
        formatted_message = self._format_message(level, message, context)

        if kwargs:
            formatted_message += self._colorize(f" | {self._format_extras(kwargs)}", Colors.DIM)

        stream = self.stream or sys.stdout
        print(formatted_message, file=stream)
        stream.flush()

    def debug(self, message: str, context: Optional[str] = None, **kwargs):
        self._log(LogLevel.DEBUG, message, context, **kwargs)

    def info(self, message: str, context: Optional[str] = None, **kwargs):
        self._log(LogLevel.INFO, message, context, **kwargs)

    def warning(self, message: str, context: Optional[str] = None, **kwargs):
        self._log(LogLevel.WARNING, message, context, **kwargs)

    def error(self, message: str, context: Optional[str] = None, **kwargs):
        self._log(LogLevel.ERROR, message, context, **kwargs)

    def success(self, message: str, context: Optional[str] = None, **kwargs):
        self._log(LogLevel.SUCCESS, message, context, **kwargs)


# Global logger instances for different services
comment_logger = SnapgramLogger("COMMENTS", enable_colors=settings.LOG_COLORS)
store_logger = SnapgramLogger("STORE", enable_colors=settings.LOG_COLORS)
user_logger = SnapgramLogger("USERS", enable_colors=settings.LOG_COLORS)
api_logger = SnapgramLogger("API", enable_colors=settings.LOG_COLORS)

def get_logger(service_name: str) -> SnapgramLogger:
    """Get a logger instance for a specific service"""
    return SnapgramLogger(service_name, enable_colors=settings.LOG_COLORS)
