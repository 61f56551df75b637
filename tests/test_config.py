"""
Tests for layout file configuration.
"""

import logging
from pathlib import Path

import pytest

from lanelayout.adapters.yaml_layout_source import YamlLayoutSource
from lanelayout.config import AppConfig
from lanelayout.domain.exceptions import LayoutFileError
from lanelayout.domain.pin_fall_type import PinFallType

LAYOUT_YAML = """
defaults:
  pin_fall_type: FF
  log_level: info

centers:
  - name: Lucky Strike Lanes
    lanes:
      - start_lane: 1
        end_lane: 22
      - start_lane: 27
        end_lane: 60
  - name: Candlepin Corner
    lanes:
      - start_lane: 1
        end_lane: 10
        pin_fall_type: Free Fall
      - start_lane: 11
        end_lane: 20
        pin_fall_type: SP
"""


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "lanes.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestAppConfig:
    """Tests for AppConfig loading and validation."""

    def test_load_from_yaml(self, tmp_path):
        """A well-formed file loads with parsed pin fall types."""
        config = AppConfig.load_from_yaml(_write(tmp_path, LAYOUT_YAML))

        assert [c.name for c in config.centers] == ["Lucky Strike Lanes", "Candlepin Corner"]
        assert config.defaults.pin_fall_type is PinFallType.FREE_FALL
        assert config.defaults.log_level == "INFO"
        assert config.defaults.get_log_level() == logging.INFO
        assert config.centers[1].lanes[0].pin_fall_type is PinFallType.FREE_FALL
        assert config.centers[1].lanes[1].pin_fall_type is PinFallType.STRING_PIN

    def test_missing_file(self, tmp_path):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            AppConfig.load_from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        """Broken YAML is reported as ValueError."""
        with pytest.raises(ValueError, match="Invalid YAML"):
            AppConfig.load_from_yaml(_write(tmp_path, "centers: [\n"))

    def test_root_must_be_mapping(self, tmp_path):
        """A list at the root is rejected."""
        with pytest.raises(ValueError, match="mapping at the root"):
            AppConfig.load_from_yaml(_write(tmp_path, "- 1\n- 2\n"))

    def test_unknown_pin_fall_type(self):
        """Unknown pin fall types fail type validation."""
        with pytest.raises(ValueError, match="Unknown pin fall type"):
            AppConfig(centers=[{"name": "A", "lanes": [{"start_lane": 1, "end_lane": 2, "pin_fall_type": "Duckpin"}]}])

    def test_invalid_log_level(self):
        """Log level must be a standard level name."""
        with pytest.raises(ValueError, match="log_level"):
            AppConfig(defaults={"log_level": "LOUD"})

    def test_duplicate_center_names(self):
        """Center names are unique, ignoring case."""
        with pytest.raises(ValueError, match="Duplicate center name"):
            AppConfig(centers=[{"name": "Alley"}, {"name": "alley"}])

    def test_business_rules_not_checked_here(self):
        """Even start lanes pass type validation; the domain rejects them later."""
        config = AppConfig(centers=[{"name": "A", "lanes": [{"start_lane": 2, "end_lane": 1}]}])

        assert config.centers[0].lanes[0].start_lane == 2

    def test_find_center_ignores_case(self):
        """Lookup by name is case-insensitive."""
        config = AppConfig(centers=[{"name": "Lucky Strike Lanes"}])

        assert config.find_center("lucky strike lanes") is config.centers[0]
        assert config.find_center("Other") is None

    def test_resolved_entries_fill_default_type(self):
        """Entries without a type get the default; explicit types are kept."""
        config = AppConfig(
            defaults={"pin_fall_type": "SP"},
            centers=[{
                "name": "A",
                "lanes": [
                    {"start_lane": 1, "end_lane": 2},
                    {"start_lane": 3, "end_lane": 4, "pin_fall_type": "FF"},
                ],
            }],
        )

        entries = config.resolved_entries(config.centers[0])

        assert [e.pin_fall_type for e in entries] == [PinFallType.STRING_PIN, PinFallType.FREE_FALL]
        assert config.centers[0].lanes[0].pin_fall_type is None

    def test_resolved_entries_without_default(self):
        """Without a default, missing types stay None."""
        config = AppConfig(centers=[{"name": "A", "lanes": [{"start_lane": 1, "end_lane": 2}]}])

        assert config.resolved_entries(config.centers[0])[0].pin_fall_type is None


class TestYamlLayoutSource:
    """Tests for the YAML layout source adapter."""

    def test_get_ranges(self, tmp_path):
        """Centers are returned as triples with defaults applied."""
        source = YamlLayoutSource.from_path(_write(tmp_path, LAYOUT_YAML))

        assert source.center_names() == ["Lucky Strike Lanes", "Candlepin Corner"]
        assert source.get_ranges("Lucky Strike Lanes") == [
            (1, 22, PinFallType.FREE_FALL),
            (27, 60, PinFallType.FREE_FALL),
        ]

    def test_unknown_center(self, tmp_path):
        """Unknown centers raise LayoutFileError naming the known ones."""
        source = YamlLayoutSource.from_path(_write(tmp_path, LAYOUT_YAML))

        with pytest.raises(LayoutFileError, match="Candlepin Corner"):
            source.get_ranges("Nowhere Bowl")

    def test_missing_file_wrapped(self, tmp_path):
        """Loader errors surface as LayoutFileError."""
        with pytest.raises(LayoutFileError, match="Config file not found"):
            YamlLayoutSource.from_path(tmp_path / "missing.yaml")

    def test_invalid_structure_wrapped(self, tmp_path):
        """Pydantic validation errors surface as LayoutFileError."""
        path = _write(tmp_path, "centers:\n  - name: A\n    lanes:\n      - start_lane: one\n        end_lane: 2\n")

        with pytest.raises(LayoutFileError):
            YamlLayoutSource.from_path(path)
