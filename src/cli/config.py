"""YAML configuration loading and validation.

Configuration file structure (every field optional):
    space_id: "f4012e63-3e93-4948-a7a2-609936dee3d3"
    block_count: 20
    body_depth: 3
    breadcrumbs_depth: 2
    guardian:
      channels: ["C0123456789"]
      message: "This ADR was accepted. Please announce it in #architecture."
      adr_database_id: "8f1c3b6e2a5d4f0e9b7c6a5d4e3f2a1b"
      decision_property_id: "hhz%7C"
      go_value: "Go"

Credentials never live in this file; see src.notion_api.auth.
"""

import logging
from typing import Any, Dict, Optional

import yaml

from src.page_preview.page_resolver import PreviewOptions
from src.slack_integration.models import GuardianConfig
from .errors import ConfigError, ConfigNotFoundError
from .models import AppConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads AppConfig from YAML.

    The default file is optional: when it does not exist the built-in
    defaults are used. An explicitly given path must exist.
    """

    DEFAULT_CONFIG_PATH = '.notion-unfurl/config.yaml'

    BUDGET_FIELDS = ('block_count', 'body_depth', 'breadcrumbs_depth')

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> AppConfig:
        """Load configuration.

        Args:
            config_path: Path to a YAML file, or None for the default path

        Returns:
            Parsed AppConfig

        Raises:
            ConfigNotFoundError: If an explicit config_path does not exist
            ConfigError: If the file cannot be read or is invalid
        """
        path = config_path or cls.DEFAULT_CONFIG_PATH
        try:
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            if config_path is not None:
                raise ConfigNotFoundError(config_path)
            logger.debug(f"No config file at {path}, using defaults")
            return AppConfig()
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}")

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax: {str(e)}")

        if config_dict is None:
            return AppConfig()

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        return cls._parse_config(config_dict)

    @classmethod
    def _parse_config(cls, config_dict: Dict[str, Any]) -> AppConfig:
        config = AppConfig()

        if 'space_id' in config_dict:
            config.space_id = cls._require_str(config_dict['space_id'], 'space_id')

        budgets = {}
        for name in cls.BUDGET_FIELDS:
            if name in config_dict:
                budgets[name] = cls._require_non_negative_int(config_dict[name], name)
        config.preview = PreviewOptions(**budgets)

        if config_dict.get('guardian') is not None:
            config.guardian = cls._parse_guardian(config_dict['guardian'])

        return config

    @classmethod
    def _parse_guardian(cls, guardian_dict: Any) -> GuardianConfig:
        if not isinstance(guardian_dict, dict):
            raise ConfigError("must be a dictionary", config_field='guardian')

        guardian = GuardianConfig()

        channels = guardian_dict.get('channels', [])
        if not isinstance(channels, list) or not all(isinstance(c, str) for c in channels):
            raise ConfigError("must be a list of channel ids", config_field='guardian.channels')
        guardian.channels = channels

        for name in ('message', 'decision_property_id', 'go_value'):
            if name in guardian_dict:
                setattr(guardian, name, cls._require_str(guardian_dict[name], f'guardian.{name}'))

        adr_database_id = guardian_dict.get('adr_database_id')
        if adr_database_id is not None:
            guardian.adr_database_id = cls._require_str(adr_database_id, 'guardian.adr_database_id')

        if guardian.channels and not guardian.message:
            raise ConfigError("is required when channels are set", config_field='guardian.message')

        return guardian

    @staticmethod
    def _require_str(value: Any, field_name: str) -> str:
        if not isinstance(value, str):
            raise ConfigError(
                f"must be a string, got {type(value).__name__}",
                config_field=field_name
            )
        return value

    @staticmethod
    def _require_non_negative_int(value: Any, field_name: str) -> int:
        # bool is an int subclass; "true" is never a valid budget
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigError(
                f"must be a non-negative integer, got {value!r}",
                config_field=field_name
            )
        return value
