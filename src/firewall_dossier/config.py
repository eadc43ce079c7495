"""Settings management for firewall-dossier.

Settings live in ``settings.yaml`` inside a config directory
(``~/.firewall-dossier`` by default, or ``$FIREWALL_DOSSIER_CONFIG``).
"""

import logging
import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from firewall_dossier import constants
from firewall_dossier.errors import ConfigLoadError

logger = logging.getLogger(__name__)

OutputFormat = Literal["json", "yaml", "markdown"]


class DossierSettings(BaseModel):
    """User-tunable defaults for the CLI."""

    default_device_type: str = Field(
        constants.DEVICE_TYPE_OPNSENSE,
        description="Device type written to exports whose input leaves it empty",
    )
    output_format: OutputFormat = Field("markdown", description="Default convert format")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


class SettingsManager:
    """Loads and saves DossierSettings as YAML."""

    def __init__(self, config_dir: Path | None = None) -> None:
        if config_dir is None:
            # Check for environment variable override
            env_config = os.getenv("FIREWALL_DOSSIER_CONFIG")
            if env_config:
                config_dir = Path(env_config).expanduser().resolve()
            else:
                config_dir = Path.home() / ".firewall-dossier"

        self.config_dir = config_dir
        self.settings_file = config_dir / "settings.yaml"

    def load(self) -> DossierSettings:
        """Load settings; a missing file yields defaults."""
        if not self.settings_file.exists():
            return DossierSettings()

        try:
            with open(self.settings_file, "r") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"cannot read {self.settings_file}: {e}") from e

        try:
            settings = DossierSettings.model_validate(data)
        except ValidationError as e:
            raise ConfigLoadError(f"invalid settings in {self.settings_file}: {e}") from e

        logger.debug("Loaded settings from %s", self.settings_file)
        return settings

    def save(self, settings: DossierSettings) -> None:
        """Write settings to the YAML file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.settings_file, "w") as f:
            yaml.safe_dump(settings.model_dump(), f, sort_keys=False)
