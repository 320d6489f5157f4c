"""
Configuration Management System for Serenemind

This module provides a centralized configuration system that supports a 4-tier
precedence hierarchy: environment → project → user → system defaults.
"""

import logging
import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, ConfigDict, ValidationError, model_validator
from enum import Enum

logger = logging.getLogger(__name__)


class ValidationLevel(Enum):
    """Configuration validation strictness levels"""
    STRICT = "strict"      # Fail fast on validation errors
    LENIENT = "lenient"    # Log warnings, use defaults


class StorageConfig(BaseModel):
    """Local key-value storage location"""
    model_config = ConfigDict(extra='forbid')

    data_dir: str = Field(default="data", description="Root directory for app data, relative to project root")
    storage_file: str = Field(default="storage/preferences.json", description="Preferences file inside data_dir")

    def resolve_path(self, project_root: Path) -> Path:
        data_dir = Path(self.data_dir)
        if not data_dir.is_absolute():
            data_dir = project_root / data_dir
        return data_dir / self.storage_file


class TrackerConfig(BaseModel):
    """Anger tracker screen settings"""
    model_config = ConfigDict(extra='forbid')

    progress_goal: int = Field(default=50, ge=1, le=10000, description="Count at which the progress ring is full")


class MeditationConfig(BaseModel):
    """Breathing animation settings (sizes in logical pixels)"""
    model_config = ConfigDict(extra='forbid')

    breath_seconds: float = Field(default=4.0, ge=0.5, le=30.0, description="Duration of one inhale or exhale")
    min_size: int = Field(default=120, ge=10, le=1000, description="Inner circle size when exhaled")
    max_size: int = Field(default=180, ge=10, le=1000, description="Inner circle size when inhaled")
    halo_size: int = Field(default=200, ge=10, le=1000, description="Static outer circle size")

    @model_validator(mode="after")
    def _check_sizes(self) -> "MeditationConfig":
        if not self.min_size < self.max_size <= self.halo_size:
            raise ValueError("expected min_size < max_size <= halo_size")
        return self


class UIConfig(BaseModel):
    """UI Configuration"""
    model_config = ConfigDict(extra='forbid')

    flet_web_mode: bool = Field(default=False, description="Serve the app over HTTP instead of a native window")
    flet_port: int = Field(default=8550, ge=1024, le=65535, description="Web server port")

    # Theme and appearance
    theme_mode: str = Field(default="light", description="UI theme mode")
    primary_color: str = Field(default="#9C27B0", description="Primary UI color")


class SystemConfig(BaseModel):
    """Complete system configuration"""
    model_config = ConfigDict(extra='forbid')

    storage: StorageConfig = Field(default_factory=StorageConfig)
    tracker: TrackerConfig = Field(default_factory=TrackerConfig)
    meditation: MeditationConfig = Field(default_factory=MeditationConfig)
    ui: UIConfig = Field(default_factory=UIConfig)

    # Metadata
    schema_version: int = Field(default=1, description="Configuration schema version")


# env var -> (section, key, type)
_ENV_MAP = {
    'SERENEMIND_DATA_DIR': ('storage', 'data_dir', str),
    'SERENEMIND_STORAGE_FILE': ('storage', 'storage_file', str),
    'SERENEMIND_PROGRESS_GOAL': ('tracker', 'progress_goal', int),
    'SERENEMIND_BREATH_SECONDS': ('meditation', 'breath_seconds', float),
    'FLET_WEB_MODE': ('ui', 'flet_web_mode', bool),
    'FLET_PORT': ('ui', 'flet_port', int),
}


class ConfigManager:
    """Centralized configuration manager with 4-tier precedence hierarchy"""

    def __init__(self, project_root: Optional[Path] = None):
        self.project_root = project_root or Path.cwd()
        self.config_dir = self.project_root / "serenemind" / "shared" / "config" / "settings"
        self._system_config: Optional[SystemConfig] = None
        self._user_config: Optional[Dict[str, Any]] = None
        self._project_config: Optional[Dict[str, Any]] = None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML configuration file"""
        if not file_path.exists():
            return {}

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.warning(f"Failed to load {file_path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring {file_path}: top level is not a mapping")
            return {}
        return data

    def _load_system_defaults(self) -> SystemConfig:
        """Load system default configuration"""
        if self._system_config is None:
            defaults_dict = self._load_yaml_file(self.config_dir / "defaults.yaml")

            try:
                self._system_config = SystemConfig(**defaults_dict)
            except ValidationError as e:
                logger.warning(f"System defaults validation failed: {e}")
                self._system_config = SystemConfig()

        return self._system_config

    def _load_user_config(self) -> Dict[str, Any]:
        """Load user-level configuration"""
        if self._user_config is None:
            self._user_config = self._load_yaml_file(self.config_dir / "user.yaml")
        return self._user_config

    def _load_project_config(self) -> Dict[str, Any]:
        """Load project-specific configuration"""
        if self._project_config is None:
            self._project_config = self._load_yaml_file(self.config_dir / "project.yaml")
        return self._project_config

    def _merge_configs(self) -> Dict[str, Any]:
        """Merge configurations with precedence: env → project → user → system"""
        merged = self._load_system_defaults().model_dump()
        self._deep_merge(merged, self._load_user_config())
        self._deep_merge(merged, self._load_project_config())
        self._deep_merge(merged, self._get_env_overrides())
        return merged

    def _deep_merge(self, base: Dict[str, Any], updates: Dict[str, Any]) -> None:
        """Deep merge configuration dictionaries"""
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Extract configuration overrides from environment variables"""
        overrides: Dict[str, Any] = {}
        for env_key, (section, config_key, kind) in _ENV_MAP.items():
            value = os.getenv(env_key)
            if value is None:
                continue

            if kind is bool:
                converted: Any = value.lower() in ('true', '1', 'yes', 'on')
            elif kind in (int, float):
                try:
                    converted = kind(value)
                except ValueError:
                    logger.warning(f"Ignoring {env_key}={value!r}: not a valid {kind.__name__}")
                    continue
            else:
                converted = value

            overrides.setdefault(section, {})[config_key] = converted

        return overrides

    def get_config(self, validation_level: ValidationLevel = ValidationLevel.STRICT) -> SystemConfig:
        """Get merged configuration with validation"""
        merged_config = self._merge_configs()

        try:
            return SystemConfig(**merged_config)
        except ValidationError as e:
            if validation_level == ValidationLevel.STRICT:
                raise ValueError(f"Configuration validation failed: {e}")
            logger.warning(f"Configuration validation failed, using defaults: {e}")
            return SystemConfig()

    def storage_path(self) -> Path:
        """Absolute path of the preferences file for the current configuration."""
        return self.get_config(ValidationLevel.LENIENT).storage.resolve_path(self.project_root)


# Global instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(project_root: Optional[Path] = None) -> ConfigManager:
    """Get global configuration manager instance"""
    global _config_manager
    if _config_manager is None or project_root is not None:
        _config_manager = ConfigManager(project_root)
    return _config_manager
