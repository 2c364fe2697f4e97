"""
Configuration Infrastructure

Environment-based diagnostics settings
"""

from .env_utils import parse_bool_env, parse_choice_env, parse_str_env
from .settings import LOG_FORMATS, LoggingSettings, load_logging_settings

__all__ = [
    "LOG_FORMATS",
    "LoggingSettings",
    "load_logging_settings",
    "parse_bool_env",
    "parse_choice_env",
    "parse_str_env",
]
