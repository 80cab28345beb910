"""
Configuration management for the AIS decoder.

Handles decoding options, output settings, and persistence.
"""

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..protocols.armor import ArmorMode
from ..protocols.position_report import POSITION_REPORT_TYPES

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigValidationError(ValueError):
    """Raised when configuration values are invalid."""

    pass


@dataclass
class DecoderConfig:
    """Configuration for log decoding."""

    armor_mode: str = "reference"  # "reference" or "corrected"
    message_types: Tuple[int, ...] = POSITION_REPORT_TYPES
    output_extension: str = ".txt"
    encoding: str = "utf-8"
    progress_interval: int = 1000  # Lines between progress callbacks, 0 = off
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate configuration values after initialization."""
        self.message_types = tuple(self.message_types)
        self._validate()

    def _validate(self) -> None:
        """Validate all configuration fields."""
        valid_modes = tuple(mode.value for mode in ArmorMode)
        if self.armor_mode not in valid_modes:
            raise ConfigValidationError(
                f"armor_mode must be one of {valid_modes}, got {self.armor_mode}"
            )
        if not self.message_types:
            raise ConfigValidationError("message_types must not be empty")
        for message_type in self.message_types:
            if message_type not in POSITION_REPORT_TYPES:
                raise ConfigValidationError(
                    f"message_types must be within {POSITION_REPORT_TYPES}, "
                    f"got {message_type}"
                )
        if not self.output_extension.startswith("."):
            raise ConfigValidationError(
                f"output_extension must start with '.', got {self.output_extension}"
            )
        if self.progress_interval < 0:
            raise ConfigValidationError(
                f"progress_interval must be non-negative, got {self.progress_interval}"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigValidationError(
                f"log_level must be one of {LOG_LEVELS}, got {self.log_level}"
            )

    @property
    def mode(self) -> ArmorMode:
        """Armor table selection as an enum."""
        return ArmorMode(self.armor_mode)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        data = asdict(self)
        data["message_types"] = list(self.message_types)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DecoderConfig":
        """Create configuration from dictionary."""
        return cls(**data)

    def save(self, path: str) -> bool:
        """Save configuration to JSON file.

        Args:
            path: File path to save configuration to

        Returns:
            True if saved successfully, False otherwise
        """
        try:
            with open(path, "w") as f:
                json.dump(self.to_dict(), f, indent=2)
            logger.info(f"Configuration saved to {path}")
            return True
        except OSError as e:
            logger.error(f"Failed to save configuration to {path}: {e}")
            return False

    @classmethod
    def load(cls, path: str) -> Optional["DecoderConfig"]:
        """Load configuration from JSON file.

        Args:
            path: File path to load configuration from

        Returns:
            DecoderConfig instance or None if loading failed
        """
        try:
            with open(path, "r") as f:
                data = json.load(f)
            config = cls.from_dict(data)
            logger.info(f"Configuration loaded from {path}")
            return config
        except FileNotFoundError:
            logger.warning(f"Configuration file not found: {path}")
            return None
        except OSError as e:
            logger.error(f"Failed to read configuration from {path}: {e}")
            return None
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in configuration file {path}: {e}")
            return None
        except (TypeError, ValueError) as e:
            logger.error(f"Invalid configuration format in {path}: {e}")
            return None

    @classmethod
    def get_default_config_path(cls) -> Path:
        """Get default configuration file path."""
        config_dir = Path.home() / ".config" / "ais_module"
        config_dir.mkdir(parents=True, exist_ok=True)
        return config_dir / "config.json"

    @classmethod
    def load_default(cls) -> "DecoderConfig":
        """Load from default configuration path, or create new if not found or invalid."""
        path = cls.get_default_config_path()
        if path.exists():
            config = cls.load(str(path))
            if config is not None:
                return config
            logger.warning("Using default configuration due to load failure")
        return cls()


# Preset configurations for common use cases
PRESETS: Dict[str, DecoderConfig] = {
    "reference": DecoderConfig(armor_mode="reference"),
    "corrected": DecoderConfig(armor_mode="corrected"),
}


def get_preset(name: str) -> Optional[DecoderConfig]:
    """Get a preset configuration by name."""
    preset = PRESETS.get(name)
    if preset is None:
        return None
    return DecoderConfig.from_dict(preset.to_dict())


def list_presets() -> List[str]:
    """List available preset names."""
    return list(PRESETS.keys())
