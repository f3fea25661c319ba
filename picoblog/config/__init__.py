"""
Configuration module for Picoblog.
"""

from .settings import BlogConfig, OutputMode, LogLevel
from .environment import EnvironmentLoader
from .validation import ConfigValidator

__all__ = [
    'BlogConfig',
    'OutputMode',
    'LogLevel',
    'EnvironmentLoader',
    'ConfigValidator',
]
