"""
Tests for configuration models and the YAML config loader.
"""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from chuk_mcp_tonnetz.config import DEFAULT_CONFIG_NAME, ConfigLoader
from chuk_mcp_tonnetz.models import (
    AgentConfig,
    LatticeConfig,
    PlaybackConfig,
    TonnetzConfig,
)


class TestModels:
    """Tests for pydantic config models."""

    def test_defaults(self) -> None:
        config = TonnetzConfig()
        assert config.lattice.grid_width == 12
        assert config.lattice.grid_height == 8
        assert config.lattice.triangle_size == 3.0
        assert config.lattice.fifth_interval == 7
        assert config.lattice.major_third_interval == 4
        assert config.lattice.base_octave == 60
        assert config.lattice.bucket_size is None
        assert config.agent.speed == pytest.approx(0.00167)
        assert config.agent.friction == pytest.approx(0.95)
        assert config.playback.chord_duration == pytest.approx(0.8)
        assert config.playback.master_gain == pytest.approx(0.3)

    def test_validation(self) -> None:
        with pytest.raises(ValidationError):
            LatticeConfig(grid_width=-1)
        with pytest.raises(ValidationError):
            LatticeConfig(triangle_size=0)
        with pytest.raises(ValidationError):
            AgentConfig(friction=1.5)
        with pytest.raises(ValidationError):
            PlaybackConfig(channel=16)

    def test_minor_third_must_match_axes(self) -> None:
        """The minor third is the fifth minus the major third, mod 12."""
        with pytest.raises(ValidationError, match="minor_third_interval"):
            LatticeConfig(minor_third_interval=2)
        with pytest.raises(ValidationError):
            LatticeConfig(fifth_interval=7, major_third_interval=3)

        descending = LatticeConfig(fifth_interval=-5, major_third_interval=-8)
        assert descending.minor_third_interval == 3
        swapped = LatticeConfig(major_third_interval=3, minor_third_interval=4)
        assert swapped.minor_third_interval == 4

    def test_frozen(self) -> None:
        config = LatticeConfig()
        with pytest.raises(ValidationError):
            config.grid_width = 4  # type: ignore[misc]

    def test_to_dict(self) -> None:
        data = TonnetzConfig().to_dict()
        assert set(data) == {"lattice", "agent", "playback"}
        assert data["lattice"]["grid_width"] == 12


class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_defaults_without_project(self) -> None:
        loader = ConfigLoader()
        assert loader.get_config() == TonnetzConfig()
        assert loader.list_configs() == []

    def test_defaults_when_file_missing(self, temp_dir: Path) -> None:
        loader = ConfigLoader(temp_dir)
        assert loader.get_config() == TonnetzConfig()

    def test_partial_override(self, temp_dir: Path) -> None:
        (temp_dir / "tonnetz.yaml").write_text(
            yaml.safe_dump({"lattice": {"grid_width": 4}, "playback": {"tempo": 96}})
        )
        config = ConfigLoader(temp_dir).get_config()
        assert config.lattice.grid_width == 4
        assert config.lattice.grid_height == 8
        assert config.playback.tempo == 96

    def test_empty_file(self, temp_dir: Path) -> None:
        (temp_dir / "tonnetz.yaml").write_text("")
        assert ConfigLoader(temp_dir).get_config() == TonnetzConfig()

    def test_invalid_file(self, temp_dir: Path) -> None:
        (temp_dir / "tonnetz.yaml").write_text("lattice:\n  triangle_size: -2\n")
        with pytest.raises(ValidationError):
            ConfigLoader(temp_dir).get_config()

    def test_inconsistent_intervals_in_file(self, temp_dir: Path) -> None:
        (temp_dir / "tonnetz.yaml").write_text("lattice:\n  minor_third_interval: 2\n")
        with pytest.raises(ValidationError, match="minor_third_interval"):
            ConfigLoader(temp_dir).get_config()

    def test_save_and_list(self, temp_dir: Path) -> None:
        loader = ConfigLoader(temp_dir / "configs")
        custom = TonnetzConfig(lattice=LatticeConfig(grid_width=6))
        path = loader.save_config(custom, "small")

        assert path.exists()
        assert loader.list_configs() == ["small"]
        assert loader.get_config("small") == custom

    def test_save_requires_project(self) -> None:
        with pytest.raises(ValueError, match="No project path"):
            ConfigLoader().save_config(TonnetzConfig())

    def test_cache(self, temp_dir: Path) -> None:
        loader = ConfigLoader(temp_dir)
        first = loader.get_config(DEFAULT_CONFIG_NAME)
        (temp_dir / "tonnetz.yaml").write_text("lattice:\n  grid_width: 3\n")
        assert loader.get_config() is first

        loader.clear_cache()
        assert loader.get_config().lattice.grid_width == 3
