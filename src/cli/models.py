"""Data models for CLI operations."""

from dataclasses import dataclass, field
from enum import IntEnum

from src.page_preview.visibility_checker import DEFAULT_SPACE_ID
from src.page_preview.page_resolver import PreviewOptions
from src.slack_integration.models import GuardianConfig


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Operation completed successfully
    - GENERAL_ERROR (1): General error (config issues, bad input)
    - NOT_PREVIEWABLE (2): The URL has no page id or the page is not public
    - AUTH_ERROR (3): Missing or rejected credentials
    - NETWORK_ERROR (4): Network connectivity or API availability issues

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    NOT_PREVIEWABLE = 2
    AUTH_ERROR = 3
    NETWORK_ERROR = 4


@dataclass
class AppConfig:
    """Service configuration loaded from .notion-unfurl/config.yaml.

    Attributes:
        space_id: Workspace id sent with permission checks
        preview: Traversal budgets for previews
        guardian: ADR guardian settings
    """
    space_id: str = DEFAULT_SPACE_ID
    preview: PreviewOptions = field(default_factory=PreviewOptions)
    guardian: GuardianConfig = field(default_factory=GuardianConfig)
