from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException
from pathlib import Path
from typing import Optional

from .models import AppConfig
from ..exceptions import ConfigurationError

class ConfigManager:
    """Loads the YAML configuration and validates it against the typed defaults."""

    REQUIRED_SECTIONS = ['closures', 'analysis', 'service']

    def __init__(self, config_dir: Path = Path("conf")):
        self.config_dir = config_dir

    def load(self, name: str = "config") -> DictConfig:
        config_path = self.config_dir / f"{name}.yaml"

        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        return self.validate(OmegaConf.load(config_path))

    def validate(self, cfg: DictConfig) -> DictConfig:
        """Checks required sections and merges cfg over the structured schema."""
        for key in self.REQUIRED_SECTIONS:
            if key not in cfg:
                raise ConfigurationError(f"Missing required config key: {key}", stage="config")

        schema = OmegaConf.structured(AppConfig)
        try:
            return OmegaConf.merge(schema, cfg)
        except OmegaConfBaseException as e:
            raise ConfigurationError(f"Invalid configuration: {e}", stage="config") from e

    @staticmethod
    def default(overrides: Optional[dict] = None) -> DictConfig:
        cfg = OmegaConf.structured(AppConfig)
        if overrides:
            cfg = OmegaConf.merge(cfg, overrides)
        return cfg
