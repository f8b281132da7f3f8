"""Command-line interface for Notion link previews.

This package provides the `notion-unfurl` CLI tool, which previews how shared
Notion URLs unfurl and replays saved Slack event payloads.
"""

from .config import ConfigLoader
from .models import AppConfig, ExitCode
from .errors import (
    CLIError,
    ConfigError,
    ConfigNotFoundError,
)

__all__ = [
    'ConfigLoader',
    'AppConfig',
    'ExitCode',
    'CLIError',
    'ConfigError',
    'ConfigNotFoundError',
]
