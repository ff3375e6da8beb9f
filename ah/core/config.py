import copy
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import InterpolationResolutionError

from ah.constants import CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderConfig:
    """Explicit provider settings handed to the directory and control.

    Attributes
    ----------
    region : str | None
        AWS region, or None to use the boto3 discovery chain
    profile : str | None
        Named profile from the shared credentials file, or None for default
    endpoint_url : str | None
        Override for the EC2 endpoint (e.g. LocalStack), or None
    """

    region: str | None = None
    profile: str | None = None
    endpoint_url: str | None = None


class ConfigLoader:
    """Load YAML configuration and merge it with defaults and CLI overrides."""

    def __init__(self) -> None:
        """Initialize ConfigLoader with built-in defaults."""
        self.BUILT_IN_DEFAULTS: dict[str, str | None] = {
            "region": None,
            "profile": None,
            "endpoint_url": None,
        }

    def load_config(self, config_path: str | None = None) -> dict[str, Any]:
        """Load configuration from YAML file.

        Parameters
        ----------
        config_path : str | None
            Path to YAML config file. If None, checks AH_CONFIG env var,
            then falls back to ah.yaml

        Returns
        -------
        dict[str, Any]
            Parsed configuration with variable interpolations resolved,
            empty when the file does not exist

        Raises
        ------
        ValueError
            If the file is not valid YAML or is not a mapping
        RuntimeError
            If the file exists but cannot be read
        """
        if config_path is None:
            config_path = os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE)

        config_file = Path(config_path)

        if not config_file.exists():
            logger.debug("No config file at %s, using defaults", config_file)
            return {}

        try:
            cfg = OmegaConf.load(config_file)
        except yaml.YAMLError as e:
            logger.error("Failed to parse YAML config file %s: %s", config_file, e)
            raise ValueError(f"Invalid YAML in {config_file}: {e}") from e
        except OSError as e:
            logger.error("Failed to read config file %s: %s", config_file, e)
            raise RuntimeError(f"Failed to read config file {config_file}: {e}") from e

        if cfg is None:
            return {}

        if not OmegaConf.is_dict(cfg):
            raise ValueError(f"Config file {config_file} must contain a mapping")

        try:
            config = OmegaConf.to_container(cfg, resolve=True, throw_on_missing=True)
        except InterpolationResolutionError as e:
            logger.error("Failed to resolve configuration variables: %s", e)
            raise ValueError(f"Configuration variable resolution error: {e}") from e

        return config

    def validate_config(self, config: dict[str, Any]) -> None:
        """Reject unknown keys and non-string values.

        Parameters
        ----------
        config : dict[str, Any]
            Configuration mapping loaded from YAML

        Raises
        ------
        ValueError
            If a key is not recognized or a value is not a string
        """
        for key, value in config.items():
            if key not in self.BUILT_IN_DEFAULTS:
                known = ", ".join(sorted(self.BUILT_IN_DEFAULTS))
                raise ValueError(f"Unknown configuration key '{key}'. Known keys: {known}")

            if value is not None and not isinstance(value, str):
                raise ValueError(
                    f"Configuration key '{key}' must be a string, got {type(value).__name__}"
                )

    def build_provider_config(
        self,
        config: dict[str, Any] | None = None,
        **overrides: str | None,
    ) -> ProviderConfig:
        """Merge defaults, file configuration and CLI overrides.

        Parameters
        ----------
        config : dict[str, Any] | None
            Loaded configuration; loaded from disk when None
        **overrides : str | None
            CLI values; None entries are ignored

        Returns
        -------
        ProviderConfig
            Final provider settings
        """
        if config is None:
            config = self.load_config()

        self.validate_config(config)

        merged = copy.deepcopy(self.BUILT_IN_DEFAULTS)
        merged.update(config)

        for key, value in overrides.items():
            if value is not None:
                merged[key] = value

        self.validate_config(merged)

        return ProviderConfig(**merged)
