"""
Configuration management using Pydantic models loaded from YAML.

A layout file describes one or more bowling centers and their lane ranges.
Values are checked for type here; business rules (parity, overlap,
adjacency) are left to the domain layer.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import yaml
from pydantic import BaseModel, Field, field_validator

from .domain.pin_fall_type import PinFallType

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_pin_fall_type(value):
    if isinstance(value, str):
        return PinFallType.parse(value)
    return value


class DefaultsConfig(BaseModel):
    """Defaults applied to every center in the file."""
    pin_fall_type: Optional[PinFallType] = None
    log_level: str = "WARNING"

    @field_validator("pin_fall_type", mode="before")
    @classmethod
    def validate_pin_fall_type(cls, value):
        """Accept either a code ("FF") or a name ("Free Fall")."""
        return _parse_pin_fall_type(value)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate the level is a standard logging level name."""
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value}")
        return level

    def get_log_level(self) -> int:
        """Get log level as logging constant."""
        return getattr(logging, self.log_level)


class LaneRangeEntry(BaseModel):
    """One lane range as written in the layout file."""
    start_lane: int
    end_lane: int
    pin_fall_type: Optional[PinFallType] = None

    @field_validator("pin_fall_type", mode="before")
    @classmethod
    def validate_pin_fall_type(cls, value):
        """Accept either a code ("FF") or a name ("Free Fall")."""
        return _parse_pin_fall_type(value)

    def as_triple(self) -> Tuple[int, int, Optional[PinFallType]]:
        return self.start_lane, self.end_lane, self.pin_fall_type


class CenterLayout(BaseModel):
    """Lane layout of a single bowling center."""
    name: str
    lanes: List[LaneRangeEntry] = Field(default_factory=list)


class AppConfig(BaseModel):
    """Application configuration."""
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    centers: List[CenterLayout] = Field(default_factory=list)

    @field_validator("centers")
    @classmethod
    def validate_centers(cls, value: List[CenterLayout]) -> List[CenterLayout]:
        """Ensure center names are unique."""
        seen_names: set[str] = set()
        for center in value:
            name_key = center.name.lower()
            if name_key in seen_names:
                raise ValueError(f"Duplicate center name detected: {center.name}")
            seen_names.add(name_key)
        return value

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.
        
        Args:
            config_path: Path to the YAML layout file
            
        Returns:
            AppConfig instance
            
        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a lanes.yaml file. See lanes.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data)

    def find_center(self, name: str) -> CenterLayout | None:
        """Find a center by name, ignoring case."""
        for center in self.centers:
            if center.name.lower() == name.lower():
                return center
        return None

    def resolved_entries(self, center: CenterLayout) -> List[LaneRangeEntry]:
        """
        Return a center's lane entries with the default pin fall type
        filled in where an entry omits one.
        """
        default_type = self.defaults.pin_fall_type
        if default_type is None:
            return list(center.lanes)

        return [
            entry if entry.pin_fall_type is not None
            else entry.model_copy(update={"pin_fall_type": default_type})
            for entry in center.lanes
        ]


def get_default_config_path() -> Path:
    """Get the default layout file path."""
    # Look for lanes.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "lanes.yaml"

    if not config_path.exists():
        # Try in the project root (parent of lanelayout/)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "lanes.yaml"

    return config_path
