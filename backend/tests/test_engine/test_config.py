"""Tests for settings validation and engine defaults."""

import pytest
from pydantic import ValidationError

from structgrid.config import Settings
from structgrid.engine.config import EngineConfig


def test_negative_seed_rejected():
    with pytest.raises(ValidationError):
        Settings(structgrid_seed=-1)


def test_negative_seed_from_environment_rejected(monkeypatch):
    monkeypatch.setenv("STRUCTGRID_SEED", "-3")
    with pytest.raises(ValidationError):
        Settings()


def test_ratio_out_of_range_rejected():
    with pytest.raises(ValidationError):
        Settings(active_ratio=1.5)
    with pytest.raises(ValidationError):
        Settings(mutation_probability=-0.1)


def test_engine_config_from_settings():
    config = EngineConfig.from_settings(Settings(structgrid_seed=0, grid_width=4, grid_height=3))
    assert config.seed == 0
    grid = config.grid_config()
    assert (grid.width, grid.height) == (4, 3)
    assert config.mutation_probability == Settings().mutation_probability
