"""
Configuration management with schema validation.
Settings come from an optional YAML file with ${VAR} / ${VAR:default}
substitution; a missing file yields the defaults below.
"""

import os
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ConfigError
from .logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_FILE = Path("config") / "settings.yaml"


class AppSettings(BaseModel):
    name: str = "EcoPoints"
    version: str = "1.0.0"
    environment: str = "production"


class StorageSettings(BaseModel):
    backend: Literal["json", "memory"] = "json"
    data_dir: str = "data"


class TrackerSettings(BaseModel):
    max_activities: int = Field(default=100, ge=1)
    reward_threshold: int = Field(default=100, ge=0)


class SecuritySettings(BaseModel):
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)


class LoggingSettings(BaseModel):
    level: str = "INFO"
    format: Literal["json", "console"] = "json"
    file_path: Optional[str] = None
    max_bytes: int = 10485760
    backup_count: int = 5


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    tracker: TrackerSettings = Field(default_factory=TrackerSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


class ConfigManager:
    """Load and validate settings"""

    def __init__(self, config_path: Optional[str] = None):
        load_dotenv()
        self.settings_path = Path(
            config_path or os.getenv("ECOPOINTS_CONFIG") or DEFAULT_CONFIG_FILE
        )

    def _substitute_env_vars(self, value: Any) -> Any:
        """Recursively substitute environment variables"""
        if isinstance(value, str):
            if value.startswith("${") and value.endswith("}"):
                var_expr = value[2:-1]
                if ":" in var_expr:
                    var_name, default = var_expr.split(":", 1)
                    return os.getenv(var_name.strip(), default.strip())
                env_value = os.getenv(var_expr.strip())
                if env_value is None:
                    raise ConfigError(f"Environment variable {var_expr} not found")
                return env_value
        elif isinstance(value, dict):
            return {k: self._substitute_env_vars(v) for k, v in value.items()}
        elif isinstance(value, list):
            return [self._substitute_env_vars(item) for item in value]
        return value

    def load_settings(self) -> Settings:
        """Load settings.yaml if present, then apply environment overrides"""
        raw_data = {}
        if self.settings_path.exists():
            try:
                with open(self.settings_path, "r", encoding="utf-8") as f:
                    raw_data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise ConfigError(f"Failed to read settings from {self.settings_path}: {e}")
            if not isinstance(raw_data, dict):
                raise ConfigError(f"Settings file must contain a mapping: {self.settings_path}")
        else:
            logger.debug("Settings file not found, using defaults", path=str(self.settings_path))

        processed = self._substitute_env_vars(raw_data)

        data_dir = os.getenv("ECOPOINTS_DATA_DIR")
        if data_dir:
            processed["storage"] = {**(processed.get("storage") or {}), "data_dir": data_dir}
        log_level = os.getenv("ECOPOINTS_LOG_LEVEL")
        if log_level:
            processed["logging"] = {**(processed.get("logging") or {}), "level": log_level}

        try:
            return Settings(**processed)
        except PydanticValidationError as e:
            raise ConfigError(f"Invalid settings in {self.settings_path}: {e}")


def load_settings(config_path: Optional[str] = None) -> Settings:
    return ConfigManager(config_path).load_settings()
