from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ValidationError as PydanticValidationError

from fstree.core.options import WalkOptions
from fstree.utils.error_handling import ConfigError
from fstree.utils.logging import get_logger

logger = get_logger(__name__)


class FstreeConfig(BaseModel):
    """Default walk options and logging settings."""

    # Filters
    all_files: bool = False
    dirs_only: bool = False
    full_path: bool = False
    permissions: bool = False
    file_limit: Optional[int] = None
    max_depth: Optional[int] = None

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @staticmethod
    def default_path() -> Path:
        return Path.home() / ".fstree" / "config.yaml"

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "FstreeConfig":
        """
        Load config from YAML file or use defaults.

        Args:
            config_path: Path to YAML config file. If None, looks for ~/.fstree/config.yaml

        Returns:
            FstreeConfig instance

        Raises:
            ConfigError: an explicitly given config_path does not exist
        """
        explicit = config_path is not None
        if config_path is None:
            config_path = str(cls.default_path())

        if not Path(config_path).exists():
            if explicit:
                raise ConfigError(
                    f"Config file not found: {config_path}", config_path=config_path
                )
            return cls()

        try:
            with open(config_path, "r") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise TypeError(f"expected a mapping, got {type(data).__name__}")
            return cls(**data)
        except (OSError, yaml.YAMLError, TypeError, PydanticValidationError) as e:
            # If config file is invalid, use defaults and warn
            logger.warning(
                "Invalid config file, using default configuration",
                config_path=config_path,
                error=str(e),
            )
            return cls()

    def to_options(self, **overrides) -> WalkOptions:
        """Build WalkOptions, letting non-None ``overrides`` win over the file."""
        values = {
            "all_files": self.all_files,
            "dirs_only": self.dirs_only,
            "full_path": self.full_path,
            "permissions": self.permissions,
            "file_limit": self.file_limit,
            "max_depth": self.max_depth,
        }
        for key, value in overrides.items():
            if key not in values:
                raise ConfigError(f"Unknown option: {key}", option=key)
            if value is not None:
                values[key] = value
        return WalkOptions(**values)
